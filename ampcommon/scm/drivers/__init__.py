"""GitHub API paths and payload models."""