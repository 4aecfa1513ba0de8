"""Session control: a persistent environment of named definitions plus a queue of terms to normalize under it."""

from nbe.pure.normalize import names, nf
from nbe.pure.persistent import NIL
from nbe.pure.semantic import bind, evaluate


class Session:
    """Governs a normalization session, with control over the names bound in its environment."""

    def __init__(self, error_handler=None):
        self.error_handler = error_handler  # if set, failures are reported through it instead of raised

        self.env = NIL      # persistent list of (name, value) bindings, most recent first
        self.to_exec = []   # terms to normalize on the next run
        self.results = []   # normal forms, in the order their terms were added

    @property
    def names(self):
        """Names bound in this session, most recent first. Shadowed names appear once per definition."""
        return list(names(self.env))

    def define(self, name, term):
        """Evaluates term under the current environment and binds the result to name. Earlier environments are left
        untouched, so anything already holding self.env keeps seeing the old bindings.
        """
        self.env = bind(self.env, name, evaluate(term, self.env))

    def normalize(self, term):
        """Returns the normal form of term under this session's environment."""
        return nf(term, self.env)

    def add(self, term):
        """Queues term. Normalization is delayed until run is called."""
        self.to_exec.append(term)

    def run(self):
        """Normalizes every queued term, appending the normal forms to self.results. Will raise any errors that are
        encountered, unless an error handler was given.
        """
        while self.to_exec:
            term = self.to_exec.pop(0)

            if self.error_handler is None:
                self.results.append(self.normalize(term))
                continue

            label = f"term {len(self.results) + 1}"
            self.error_handler.register(label, str(term))
            with self.error_handler:
                self.results.append(self.normalize(term))
                self.error_handler.remove(label)

    def pop(self):
        """Removes and returns the oldest result."""
        return self.results.pop(0)
