"""rhoas-kafka: list managed Kafka instances and the clusters they run on."""

__version__ = "0.1.0"
