from eventry.stores.interfaces import AnalyticsStore
from eventry.stores.sqlalchemy_store import SqlAlchemyAnalyticsStore

__all__ = ["AnalyticsStore", "SqlAlchemyAnalyticsStore"]
