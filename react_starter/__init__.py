"""create-my-react-app -- scaffold React projects from built-in templates."""

__version__ = "0.1.0"
