"""Core cross-cutting concerns: exceptions, logging, middleware, pagination."""
