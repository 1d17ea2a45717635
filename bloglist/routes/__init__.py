from bloglist.routes.auth import router as auth_router
from bloglist.routes.blog import router as blog_router
from bloglist.routes.stats import router as stats_router
from bloglist.routes.user import router as user_router

__all__ = ["auth_router", "blog_router", "stats_router", "user_router"]
