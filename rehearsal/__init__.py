"""Rehearsal: role-play sales training with AI-simulated guests.

A trainee chats with a simulated customer; every exchange is persisted and
the customer's replies can be narrated through a text-to-speech provider.
"""

__version__ = "0.1.0"
