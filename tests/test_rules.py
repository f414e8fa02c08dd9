"""
Rule Table Tests
================

- Header table keys are the seven resolvable fields, always in fixed order.
- Synonyms can be added/removed, fields cannot.
- Product rules keep insertion order; re-adding a keyword keeps its slot.
"""
import os
import sys
import unittest

os.environ.setdefault('ENABLE_FILE_LOGGING', 'false')
SRC_DIR = os.path.join(os.path.dirname(__file__), '..', 'src')
sys.path.insert(0, os.path.abspath(SRC_DIR))

import config
from order_consolidation.fields import CanonicalField, RESOLVABLE_FIELDS
from order_consolidation.rules import HeaderRuleTable, ProductRuleTable


class TestHeaderRuleTable(unittest.TestCase):
    def test_defaults_match_config(self):
        table = HeaderRuleTable.defaults()
        self.assertEqual(table.to_dict(), config.DEFAULT_HEADER_MAPPING)

    def test_fixed_field_order(self):
        table = HeaderRuleTable({'quantity': ['수량'], 'receiver': ['수령인']})
        fields = [field for field, _ in table.items()]
        self.assertEqual(fields, RESOLVABLE_FIELDS)
        self.assertEqual(table.synonyms('contact'), [])

    def test_add_and_remove_synonym(self):
        table = HeaderRuleTable.defaults()
        self.assertTrue(table.add_synonym(CanonicalField.CONTACT, ' 수취인 핸드폰 '))
        self.assertIn('수취인 핸드폰', table.synonyms('contact'))
        self.assertFalse(table.add_synonym('contact', '수취인 핸드폰'))

        self.assertTrue(table.remove_synonym('contact', '수취인 핸드폰'))
        self.assertFalse(table.remove_synonym('contact', '수취인 핸드폰'))

    def test_blank_synonym_rejected(self):
        with self.assertRaises(ValueError):
            HeaderRuleTable.defaults().add_synonym('receiver', '   ')

    def test_unknown_field_rejected(self):
        with self.assertRaises(ValueError):
            HeaderRuleTable({'price': ['가격']})
        with self.assertRaises(ValueError):
            HeaderRuleTable.defaults().add_synonym('courier', '택배사')

    def test_reset(self):
        table = HeaderRuleTable.defaults()
        table.add_synonym('receiver', '고객명')
        table.remove_synonym('address', '주소')
        table.reset()
        self.assertEqual(table, HeaderRuleTable.defaults())

    def test_copy_is_independent(self):
        table = HeaderRuleTable.defaults()
        clone = table.copy()
        clone.add_synonym('message', '요청사항')
        self.assertNotIn('요청사항', table.synonyms('message'))


class TestProductRuleTable(unittest.TestCase):
    def test_defaults(self):
        table = ProductRuleTable.defaults()
        self.assertEqual(list(table.items()), config.DEFAULT_PRODUCT_RULES)

    def test_readd_keeps_position(self):
        table = ProductRuleTable([('반숙', 'A'), ('구운', 'B')])
        table.add_rule('반숙', 'C')
        self.assertEqual(list(table.items()), [('반숙', 'C'), ('구운', 'B')])

    def test_add_appends(self):
        table = ProductRuleTable([('반숙', 'A')])
        table.add_rule(' 메추리 ', ' 메추리알 50구 ')
        self.assertEqual(table.keywords(), ['반숙', '메추리'])
        self.assertEqual(table.to_dict()['메추리'], '메추리알 50구')

    def test_blank_rule_rejected(self):
        table = ProductRuleTable([])
        with self.assertRaises(ValueError):
            table.add_rule('', '반숙란 30구')
        with self.assertRaises(ValueError):
            table.add_rule('반숙', ' ')

    def test_remove_and_reset(self):
        table = ProductRuleTable.defaults()
        self.assertTrue(table.remove_rule('훈제'))
        self.assertFalse(table.remove_rule('훈제'))
        self.assertEqual(len(table), len(config.DEFAULT_PRODUCT_RULES) - 1)
        table.reset()
        self.assertEqual(table, ProductRuleTable.defaults())

    def test_from_dict_accepts_pairs(self):
        table = ProductRuleTable.from_dict([['반숙', 'A'], ['구운', 'B']])
        self.assertEqual(table.to_list(), [['반숙', 'A'], ['구운', 'B']])


if __name__ == "__main__":
    unittest.main()
