class Rule:
    """A named command template plus its optional attributes.

    `command` is required and may not be set to None or ''. String
    attributes left as None (or '') and boolean attributes left as False
    are not written out.
    """

    def __init__(self, name, command, description=None, depfile=None,
                 generator=False, pool=None, restat=False, rspfile=None,
                 rspfile_content=None, deps=None):
        self.name = name
        self.command = command
        self.description = description
        self.depfile = depfile
        self.generator = generator
        self.pool = pool
        self.restat = restat
        self.rspfile = rspfile
        self.rspfile_content = rspfile_content
        self.deps = deps

    @property
    def command(self):
        return self._command

    @command.setter
    def command(self, value):
        if not value:
            raise ValueError('rule %r has no command' % self.name)
        self._command = value

    def __repr__(self):
        return 'Rule(%r, %r)' % (self.name, self.command)
