from worksync.application.queries.users.list_users_query import ListUsersQuery

__all__ = ["ListUsersQuery"]
