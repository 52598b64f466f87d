"""
ids.py - identifier generation
Single responsibility: unique ids for users and bugs.
"""
import uuid


def new_id() -> str:
    return uuid.uuid4().hex
