"""Subcommands of aws-login."""
