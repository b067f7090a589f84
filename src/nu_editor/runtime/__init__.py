"""Process-wide services: telemetry and logging."""
