from collections.abc import Mapping

from ninja_writer.escape import as_list


class Build:
    """One build statement: outputs produced from inputs by a named rule.

    Path arguments may be a single string or any iterable of strings,
    both at construction and when assigned later. `variables` is a
    mapping or an iterable of (key, value) pairs and is written below the
    statement as per-edge overrides.
    """

    def __init__(self, outputs, rule, inputs=None, implicit=None,
                 order_only=None, variables=None, implicit_outputs=None,
                 pool=None, dyndep=None):
        self.rule = rule
        self.outputs = outputs
        self.inputs = inputs
        self.implicit = implicit
        self.order_only = order_only
        self.implicit_outputs = implicit_outputs
        self.variables = variables
        self.pool = pool
        self.dyndep = dyndep

    @property
    def outputs(self):
        return self._outputs

    @outputs.setter
    def outputs(self, value):
        outputs = as_list(value)
        if not outputs:
            raise ValueError('build statement for rule %r has no outputs' % self.rule)
        self._outputs = outputs

    @property
    def inputs(self):
        return self._inputs

    @inputs.setter
    def inputs(self, value):
        self._inputs = as_list(value)

    @property
    def implicit(self):
        return self._implicit

    @implicit.setter
    def implicit(self, value):
        self._implicit = as_list(value)

    @property
    def order_only(self):
        return self._order_only

    @order_only.setter
    def order_only(self, value):
        self._order_only = as_list(value)

    @property
    def implicit_outputs(self):
        return self._implicit_outputs

    @implicit_outputs.setter
    def implicit_outputs(self, value):
        self._implicit_outputs = as_list(value)

    def variable_items(self):
        if not self.variables:
            return []
        if isinstance(self.variables, Mapping):
            return list(self.variables.items())
        return list(self.variables)

    def __repr__(self):
        return 'Build(%r, %r)' % (self.outputs, self.rule)
