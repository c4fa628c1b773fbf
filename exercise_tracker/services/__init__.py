"""Services: async persistence operations called by the route handlers."""
