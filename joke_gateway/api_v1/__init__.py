"""HTTP routers for Joke Gateway."""
