"""Kafka instance domain."""
