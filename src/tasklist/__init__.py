"""In-memory task list: task store, view pipeline and a console front-end."""
