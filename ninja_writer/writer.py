"""Writer for .ninja build files.

All output is accumulated in memory; nothing touches the filesystem until
Writer.close() is called.
"""
import logging

from ninja_writer.build import Build
from ninja_writer.escape import as_list, escape_path
from ninja_writer.rule import Rule

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 78
INDENT = '  '


def _dollars_before(text, index):
    return text.count('$', 0, index)


def wrap(text, indent=0, width=DEFAULT_WIDTH):
    """Split 'text' into physical lines no wider than 'width' if possible.

    Lines are broken on spaces only, never on a space preceded by an odd
    number of '$' (an escaped space or an open variable reference), and
    end with the ' $' continuation marker. Continuation lines are indented
    two levels deeper than the statement itself. When no usable space is
    left the rest of the text is emitted as one over-width line.
    """
    lines = []
    leading_space = INDENT * indent
    while len(leading_space) + len(text) > width:
        # The text is too wide; wrap if possible.

        # Find the rightmost space that would obey our width constraint and
        # that's not an escaped space.
        available_space = max(width - len(leading_space) - len(' $'), 0)
        space = available_space
        while True:
            space = text.rfind(' ', 0, space)
            if space < 0 or _dollars_before(text, space) % 2 == 0:
                break

        if space < 0:
            # No such space; just use the first unescaped space we can find.
            space = available_space - 1
            while True:
                space = text.find(' ', space + 1)
                if space < 0 or _dollars_before(text, space) % 2 == 0:
                    break

        if space < 0:
            logger.debug('no split point left, writing %d column line',
                         len(leading_space) + len(text))
            break

        lines.append(leading_space + text[:space] + ' $')
        text = text[space + 1:]

        # Subsequent lines are continuations, so indent them.
        leading_space = INDENT * (indent + 2)

    lines.append(leading_space + text)
    return lines


class Writer:
    def __init__(self, path=None, width=DEFAULT_WIDTH):
        self.path = path
        self.width = width
        self._buffer = bytearray()

    def text(self):
        return self._buffer.decode('utf-8')

    def close(self):
        """Write the buffer to self.path, replacing any previous contents."""
        if self.path is None:
            raise ValueError('Writer has no output path to write to')
        with open(self.path, 'wb') as f:
            f.write(self._buffer)
        logger.debug('wrote %d bytes to %s', len(self._buffer), self.path)
        return self.path

    def newline(self):
        self._write([''])

    def comment(self, text):
        self._write(['# ' + text])

    def variable(self, key, value, indent=0):
        self._write(self._variable(key, value, indent))

    def pool(self, name, depth):
        lines = ['pool %s' % name]
        lines += self._variable('depth', depth, 1)
        self._write(lines)

    def rule(self, name, command=None, **kwargs):
        if isinstance(name, Rule):
            if command is not None or kwargs:
                raise TypeError('rule() takes a Rule or its fields, not both')
            rule = name
        else:
            rule = Rule(name, command, **kwargs)

        lines = self._wrap('rule %s' % rule.name)
        lines += self._variable('command', rule.command, 1)
        if rule.description:
            lines += self._variable('description', rule.description, 1)
        if rule.depfile:
            lines += self._variable('depfile', rule.depfile, 1)
        if rule.generator:
            lines += self._variable('generator', '1', 1)
        if rule.pool:
            lines += self._variable('pool', rule.pool, 1)
        if rule.restat:
            lines += self._variable('restat', '1', 1)
        if rule.rspfile:
            lines += self._variable('rspfile', rule.rspfile, 1)
        if rule.rspfile_content:
            lines += self._variable('rspfile_content', rule.rspfile_content, 1)
        if rule.deps:
            lines += self._variable('deps', rule.deps, 1)
        self._write(lines)

    def build(self, outputs, rule=None, inputs=None, **kwargs):
        if isinstance(outputs, Build):
            if rule is not None or inputs is not None or kwargs:
                raise TypeError('build() takes a Build or its fields, not both')
            edge = outputs
        else:
            edge = Build(outputs, rule, inputs, **kwargs)
        if not edge.outputs:
            raise ValueError('build statement for rule %r has no outputs' % edge.rule)

        out_outputs = [escape_path(x) for x in edge.outputs]
        all_inputs = [escape_path(x) for x in edge.inputs]

        if edge.implicit:
            all_inputs.append('|')
            all_inputs.extend(escape_path(x) for x in edge.implicit)
        if edge.order_only:
            all_inputs.append('||')
            all_inputs.extend(escape_path(x) for x in edge.order_only)
        if edge.implicit_outputs:
            out_outputs.append('|')
            out_outputs.extend(escape_path(x) for x in edge.implicit_outputs)

        lines = self._wrap('build %s: %s' % (' '.join(out_outputs),
                                             ' '.join([edge.rule] + all_inputs)))
        if edge.pool:
            lines += self._variable('pool', edge.pool, 1)
        if edge.dyndep:
            lines += self._variable('dyndep', edge.dyndep, 1)
        for key, value in edge.variable_items():
            lines += self._variable(key, value, 1)
        self._write(lines)

        return edge.outputs

    def include(self, path):
        self._write(self._wrap('include %s' % path))

    def subninja(self, path):
        self._write(self._wrap('subninja %s' % path))

    def default(self, paths):
        paths = [escape_path(x) for x in as_list(paths)]
        self._write(self._wrap('default %s' % ' '.join(paths)))

    def _variable(self, key, value, indent):
        if value is None:
            return []
        if isinstance(value, (list, tuple)):
            value = ' '.join(filter(None, value))
        return self._wrap('%s = %s' % (key, value), indent)

    def _wrap(self, text, indent=0):
        return wrap(text, indent, self.width)

    def _write(self, lines):
        # Encode the whole statement first so a failure appends nothing.
        data = ''.join(line + '\n' for line in lines).encode('utf-8')
        self._buffer += data
