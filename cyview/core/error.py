
# Base
class CyviewError(Exception):
    def __init__(self, err, desc=None):
        text = err
        if desc is not None: text += f' ({desc})'
        text += '.'
        super().__init__(text)

# Argument
class ArgumentTypeError(CyviewError, TypeError):
    def __init__(self, name, arg, expect_types, **kwargs):
        expects = ','.join([tp.__name__ for tp in expect_types])
        super().__init__(f'Type of {name} is {type(arg)}, expect: {expects}', **kwargs)

class InvalidArgumentError(CyviewError, ValueError):
    def __init__(self, name, value, **kwargs):
        super().__init__(f'Argument {name}={value} is invalid', **kwargs)

# Access
class OutOfRangeError(CyviewError, IndexError):
    def __init__(self, index, size, **kwargs):
        self.index = index
        self.size = size
        super().__init__(f'View index {index} out of range [0, {size})', **kwargs)

class EmptyViewError(OutOfRangeError):
    def __init__(self, index, **kwargs):
        super().__init__(index, 0, desc='reading from an empty view', **kwargs)

# Traversal
class ExhaustedError(CyviewError, StopIteration):
    def __init__(self, size, **kwargs):
        super().__init__(f'Iterator exceeded after {size} elements', **kwargs)
