"""Web application for browsing the knowledge base."""
