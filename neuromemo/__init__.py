"""
NeuroMemo engine.

Mastery tracking and review scheduling for neuroanatomy study, together with
the in-memory structure catalog it draws items from.
"""

__version__ = "0.1.0"
