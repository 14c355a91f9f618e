"""Product service: static grocery catalog with filtered, paginated reads."""
