"""GitHub client setup and the githubkit-backed adapter."""
