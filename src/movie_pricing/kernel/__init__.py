from .factory import MovieFactory, avatar, factory_for_catalog, star_wars, titanic

__all__ = ["MovieFactory", "avatar", "factory_for_catalog", "star_wars", "titanic"]
