"""SQLAlchemy persistence for users and shifts."""
