"""Core layers of the chat policy SDK.

- registry: known models grouped by provider
- capabilities: capability classification of model identifiers
- content: message text extraction and prompt composition
- policy: timeout budgets, plugin gate and request planning
- versioning: version comparison
"""
