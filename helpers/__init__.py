"""Small helpers shared by the datastore layer and the routes."""
