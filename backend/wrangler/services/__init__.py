"""Services — async orchestration of host lookups around the pure core."""
