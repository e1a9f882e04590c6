"""
sitechat: turn web pages into a namespaced, retrievable knowledge base and
answer questions grounded in it.
"""

__version__ = "0.1.0"
