"""Infrastructure layer — database engine, schema, unit of work, datastore."""
