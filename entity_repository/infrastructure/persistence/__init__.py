"""Persistence package: entity mixins, query composition and SQL repositories."""
