import dearcygui as dcg
import threading


# Global context storage
class _ThreadLocalStack(threading.local):
    def __init__(self):
        self.data = []

    def __len__(self):
        return len(self.data)

    def append(self, item):
        self.data.append(item)

    def pop(self):
        return self.data.pop()

    def peek(self):
        if not self.data:
            raise RuntimeError("No context available.")
        return self.data[-1]

_context_stack = _ThreadLocalStack()

def push_context(context: dcg.Context):
    """Push a new context onto the context stack."""
    _context_stack.append(context)

def pop_context():
    """Pop the current context from the context stack."""
    if len(_context_stack) == 0:
        raise RuntimeError("No context to pop from the stack.")
    return _context_stack.pop()

def get_context() -> dcg.Context:
    """Get the current DearCyGui context."""
    if len(_context_stack) == 0:
        raise RuntimeError("No DearCyGui context available. Draw from inside a slide or pass the context.")
    return _context_stack.peek()
