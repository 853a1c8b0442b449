"""Persistence: SQLAlchemy engine, ORM models, repositories, migrations."""
