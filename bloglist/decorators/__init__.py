from bloglist.decorators.metrics import timed
from bloglist.decorators.with_retry import with_retry

__all__ = ["timed", "with_retry"]
