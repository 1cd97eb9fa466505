"""
Monkey Catalog - browse a curated dataset of monkey species

Provides:
- A read-only built-in catalog with lookup by name and random pick
- An external retriever that asks a tool server (spawned as a child
  process) for more monkeys and degrades to an empty result on failure
- A console CLI with an interactive menu
"""

__version__ = "0.1.0"
