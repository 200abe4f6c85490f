"""ExitPlans API: admission control, provider fallback and job tracking."""
