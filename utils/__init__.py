"""Auth, token and upload helpers shared by the API blueprints."""
