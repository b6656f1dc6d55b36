"""Game state, messages, console helpers and AMQP publish/subscribe helpers for the Peril strategy game."""

__version__ = "0.1.0"