"""
Tests for the bridge object model.
"""

import unittest

from pydantic import ValidationError

from bridge_idl.static_analysis.model.model import (
    AnalysisOutput,
    Argument,
    ArgumentType,
    BlobStructure,
    ClassObject,
    Method,
    Property,
    PropertyKind,
)


class TestModel(unittest.TestCase):
    """Test cases for the object model."""

    def test_method_defaults_to_function_kind(self):
        method = Method(name='run')
        self.assertEqual(method.kind, PropertyKind.function)
        self.assertEqual(list(method.arguments), [])
        self.assertIsInstance(method, Property)

    def test_method_rejects_non_function_kind(self):
        with self.assertRaises(ValidationError):
            Method(name='run', kind=PropertyKind.string)

    def test_argument_defaults(self):
        argument = Argument()
        self.assertEqual(argument.name, '')
        self.assertEqual(argument.type, ArgumentType.union)
        self.assertTrue(argument.required)
        self.assertEqual(ArgumentType.union.value, 'UnionType')

    def test_models_are_immutable(self):
        cls = ClassObject(name='Foo')
        with self.assertRaises(ValidationError):
            cls.name = 'Bar'
        with self.assertRaises(ValidationError):
            Property(name='x', kind=PropertyKind.string).kind = PropertyKind.number

    def test_member_sequences_are_immutable_and_hashable(self):
        cls = ClassObject(
            name='Foo',
            properties=[Property(name='x', kind=PropertyKind.string)],
            methods=[Method(name='f', arguments=[Argument(name='a')])],
        )
        self.assertIsInstance(cls.properties, tuple)
        self.assertIsInstance(cls.methods[0].arguments, tuple)
        with self.assertRaises(AttributeError):
            cls.properties.append(Property(name='y', kind=PropertyKind.number))
        same = ClassObject(
            name='Foo',
            properties=[Property(name='x', kind=PropertyKind.string)],
            methods=[Method(name='f', arguments=[Argument(name='a')])],
        )
        self.assertEqual(hash(cls), hash(same))
        self.assertEqual(len({cls, same}), 1)

    def test_value_equality(self):
        self.assertEqual(
            ClassObject(name='Foo', properties=[Property(name='x', kind=PropertyKind.number)]),
            ClassObject(name='Foo', properties=[Property(name='x', kind=PropertyKind.number)]),
        )
        self.assertNotEqual(Property(name='f', kind=PropertyKind.function), Method(name='f'))

    def test_base_type_alias(self):
        self.assertEqual(ClassObject(name='Foo', baseType='Bar').base_type, 'Bar')
        self.assertEqual(ClassObject(name='Foo', base_type='Bar').base_type, 'Bar')
        dumped = ClassObject(name='Foo', base_type='Bar').model_dump(by_alias=True)
        self.assertEqual(dumped['baseType'], 'Bar')
        self.assertNotIn('base_type', dumped)

    def test_dump_uses_tag_values(self):
        output = AnalysisOutput(units=[BlobStructure(
            source_file='a.d.ts',
            filename='a',
            objects=[ClassObject(name='A', methods=[Method(name='f', arguments=[Argument(name='x')])])],
        )])
        dumped = output.model_dump(mode='json', by_alias=True)
        method = dumped['units'][0]['objects'][0]['methods'][0]
        self.assertEqual(method['kind'], 'function')
        self.assertEqual(method['arguments'], [{'name': 'x', 'type': 'UnionType', 'required': True}])


if __name__ == '__main__':
    unittest.main()
