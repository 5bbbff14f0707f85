class SatchelError(RuntimeError):
    """Base exception for Satchel errors."""
