"""OpenShift cluster domain."""
