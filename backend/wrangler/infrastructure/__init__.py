"""Infrastructure — host adapters (REST client, configuration store, bundle) and logging."""
