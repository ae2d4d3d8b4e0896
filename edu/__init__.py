"""edu: todo list and user registration CLIs over flat JSON record stores."""

__version__ = "0.1.0"
