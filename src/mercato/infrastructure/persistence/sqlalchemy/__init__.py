"""SQLAlchemy persistence for the marketplace domain."""
