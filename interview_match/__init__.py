"""Models, user store, quiz storage, keyboards and a Telegram client for an interview-partner and quiz bot."""

__version__ = "0.1.0"