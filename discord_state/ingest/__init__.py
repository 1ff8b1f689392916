"""Discord State ingest pipeline.

Turns gateway events into cached entities. The GUILD_CREATE snapshot
ingestor is the core; the dispatcher and replay runner feed it recorded
gateway traffic.

Usage:
    python -m discord_state.ingest shard-0.jsonl shard-1.jsonl
    python -m discord_state.ingest --config config.json
"""
