"""
toolchat - a tool-augmented conversation orchestrator.

This package lets a chat model call side-effecting tools mid-conversation:
- Conversation loop that feeds tool results back to the model
- Concurrent, order-preserving execution of tool-call batches
- Shell command execution with exit-code reporting
- File read/write/list tools
"""

__version__ = "0.1.0"
