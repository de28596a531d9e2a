# Service layer
