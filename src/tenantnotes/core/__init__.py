"""Domain core: models, repositories, schemas, services and policies."""
