"""Dad-Joke Greeter: greeting endpoint augmented with a remote dad joke.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
