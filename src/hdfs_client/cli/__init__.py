"""Command-line interface for hdfs-client."""
