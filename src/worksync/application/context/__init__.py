from worksync.application.context.caller_context import CallerContext

__all__ = ["CallerContext"]
