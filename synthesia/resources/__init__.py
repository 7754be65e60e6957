from .templates import Templates
from .uploads import Uploads
from .videos import Videos
from .webhooks import Webhooks

__all__ = ["Templates", "Uploads", "Videos", "Webhooks"]
