"""
Contains the core elements that are used within pegtx

Core:
    -Provides the standard protocol for serializable elements
    -Provides the reference formats and policy constants
    -Provides custom exceptions for the transaction builder and its collaborators
"""
# core/__init__.py
from pegtx.core.byte_stream import *
from pegtx.core.exceptions import *
from pegtx.core.formats import *
from pegtx.core.serializable import *
