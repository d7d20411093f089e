"""mdpick - pick random markdown documents by their front matter."""

__version__ = "1.0.0"
