"""GitHub integration: event payloads, the REST client and comment rendering."""
