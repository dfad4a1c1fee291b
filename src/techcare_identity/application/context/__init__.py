from techcare_identity.application.context.auth_context import AuthContext

__all__ = ["AuthContext"]
