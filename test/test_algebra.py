#!/usr/bin/env python

import unittest

from lxml import etree

from xpathsteps import add_axis, join, contextualize, parse
from xpathsteps.exceptions import XPathStructureError

from testcore import main

class ContextualizeTest(unittest.TestCase):
    def assertContextualized(self, expected, context, xpath):
        self.assertEqual(expected, contextualize(context, xpath))

    def test_identical(self):
        self.assertContextualized('.', '/a/b/c', '/a/b/c')

    def test_identical_with_predicates(self):
        self.assertContextualized('.[f=g]', '/a/b/c[d=e]', '/a/b/c[d=e][f=g]')
        self.assertContextualized('.[f = g]',
            '/a/b/c[d = e]', '/a/b/c[d = e][f = g]')

    def test_context_empty(self):
        self.assertContextualized('/a/b/c', '', '/a/b/c')
        self.assertContextualized('/a/b/c', None, '/a/b/c')

    def test_under_context(self):
        self.assertContextualized('c', '/a/b', '/a/b/c')

    def test_above_context(self):
        self.assertContextualized('..', '/a/b/c', '/a/b')

    def test_sibling(self):
        self.assertContextualized('../d', '/a/b/c', '/a/b/d')

    def test_two_levels_different(self):
        self.assertContextualized('../../x/y', '/a/b/c/d', '/a/b/x/y')

    def test_all_different(self):
        self.assertContextualized('../../../x/y/z', '/a/b/c/d', '/a/x/y/z')

    def test_different_root(self):
        # Not realistic, as XML has a single root, but a valid result
        self.assertContextualized('../../../x/y/z', '/a/b/c', '/x/y/z')

    def test_attribute_in_xpath(self):
        self.assertContextualized('../c/@attribute', '/a/b', '/a/c/@attribute')

    def test_attribute_in_context(self):
        self.assertContextualized('../c/d', '/a/b/@attribute', '/a/b/c/d')

    def test_attribute_in_both(self):
        self.assertContextualized('../@x', '/a/b/c/@d', '/a/b/c/@x')

    def test_attribute_in_both_same(self):
        self.assertContextualized('.', '/a/b/c/@d', '/a/b/c/@d')

    def test_predicate_in_xpath_leaf(self):
        self.assertContextualized("../d[x/y = 'z']", '/a/b/c', "/a/b/d[x/y = 'z']")

    def test_predicate_being_the_only_difference(self):
        self.assertContextualized(".[x/y = 'z']", '/a/b/c', "/a/b/c[x/y = 'z']")

    def test_predicate_in_context_being_the_only_difference(self):
        self.assertContextualized('.', "/a/b/c[e/f = 'z']", '/a/b/c')

    def test_predicates_being_the_only_differences(self):
        self.assertContextualized("..[u/v = 'w']/c[x/y = 'z']",
            '/a/b/c', "/a/b[u/v = 'w']/c[x/y = 'z']")

    def test_predicate_in_context_leaf(self):
        self.assertContextualized('../d', "/a/b/c[e/f = 'z']", '/a/b/d')

    def test_predicate_in_both_leaf(self):
        self.assertContextualized("../d[x = 'y']",
            "/a/b/c[e = 'f']", "/a/b/d[x = 'y']")

    def test_predicate_in_xpath_middle(self):
        self.assertContextualized("..[x/y = 'z']/d", '/a/b/c', "/a/b[x/y = 'z']/d")

    def test_predicate_in_context_middle(self):
        self.assertContextualized('../d', "/a/b[e/f = 'z']/c", '/a/b/d')

    def test_predicate_same_in_both(self):
        self.assertContextualized('../d',
            "/a/b[e/f = 'z']/c", "/a/b[e/f = 'z']/d")

    def test_predicate_different_on_same_element(self):
        self.assertContextualized("../../b[x = 'y']/d",
            "/a/b[e = 'f']/c", "/a/b[x = 'y']/d")

    def test_predicate_different(self):
        self.assertContextualized(".[x = 'y']/d",
            "/a/b[e = 'f']/c", "/a/b/c[x = 'y']/d")

    def test_predicate_more_in_xpath(self):
        # [e] is already true of the context's b
        self.assertContextualized('..[f]/c/d', '/a/b[e]/c', '/a/b[e][f]/c/d')

    def test_predicate_more_in_context(self):
        self.assertContextualized('d', '/a/b[e][f]/c', '/a/b[e]/c/d')

    def test_several_predicates_identical(self):
        self.assertContextualized('d', '/a/b[e][f]/c', '/a/b[e][f]/c/d')

    def test_several_predicates_in_other_order(self):
        self.assertContextualized('d', '/a/b[f][e]/c', '/a/b[e][f]/c/d')

    def test_several_predicates_one_different(self):
        self.assertContextualized('../../b[e][x]/c/d',
            '/a/b[e][f]/c', '/a/b[e][x]/c/d')

    def test_whitespace_is_ignored(self):
        self.assertContextualized('../d', ' /a / b / c ', '/a/b/d')

    def test_self_contextualization(self):
        for xpath in ['/a', '/a/b[x][y]/c', "$v/a[@id = '1']/@x", '../a/.']:
            self.assertContextualized('.', xpath, xpath)


class AddAxisTest(unittest.TestCase):
    def test_add_axis(self):
        self.assertEqual('preceding::b/c', add_axis('preceding', 'b/c'))
        self.assertEqual('descendant::b/c', add_axis('descendant', '../../b/c'))

    def test_add_axis_drops_predicates(self):
        self.assertEqual('child::b/c', add_axis('child', 'b[1]/c'))
        self.assertEqual('ancestor::b/c', add_axis('ancestor', '../b[1]/c[x]'))

    def test_add_axis_without_steps(self):
        self.assertRaises(XPathStructureError, add_axis, 'child', '../..')


class JoinTest(unittest.TestCase):
    def test_join(self):
        self.assertEqual('a/b/c/d', join('a/b', 'c/d'))
        self.assertEqual('a/x/y', join('a/b/c', '../../x/y'))

    def test_join_blank(self):
        self.assertEqual('a/b', join('a/b', ''))
        self.assertEqual('a/b', join('a/b', None))
        self.assertEqual('c/d', join('  ', 'c/d'))
        self.assertEqual('c/d', join(None, 'c/d'))

    def test_join_stops_at_dot_steps(self):
        self.assertEqual('a/../../x', join('a/..', '../x'))
        self.assertEqual('a/./../x', join('a/.', '../x'))

    def test_join_stops_at_variable(self):
        self.assertEqual('$v/../x', join('$v/a', '../../x'))

    def test_join_drops_predicates(self):
        self.assertEqual('a/b/c', join('a/b[x=1]', 'c'))
        self.assertEqual('a/c', join('a[1]/b', "../c[x = 'y']"))

    def test_join_cancels_filtered_back_step(self):
        self.assertEqual('a/c', join('a/b', '..[y]/c'))

    def test_join_back_to_start(self):
        self.assertEqual('a', join('a/b', '..'))

    def test_join_cancels_all_of_first(self):
        # still a relative path
        self.assertEqual('x', join('a', '../x'))
        self.assertEqual('x/y', join('a/b', '../../x/y'))

    def test_join_cancels_everything(self):
        self.assertEqual('.', join('a/b', '../..'))

    def test_join_past_start(self):
        self.assertRaises(XPathStructureError, join, 'a', '../../x')


class SelectsSameNodesTest(unittest.TestCase):
    # paths evaluated from the root and their contextualized versions
    # evaluated from the context node must find the same nodes
    FIXTURE_TEXT = '''
        <a>
            <b type='x'>
                <c id='1'><e>one</e></c>
                <d kind='k'>first</d>
                <d>second</d>
            </b>
            <b type='y'>
                <c id='2'/>
                <d kind='k'>third</d>
            </b>
        </a>
    '''

    CASES = [
        ('/a/b/c', '/a/b/d'),
        ('/a/b/c', '/a/b/d[@kind]'),
        ("/a/b[@type = 'x']/c", "/a/b[@type = 'x']/d"),
        ("/a/b[@type = 'x']/c", '/a/b/c/e'),
        ('/a/b/c/e', '/a/b/d'),
        ('/a/b/c', '/a/b/c/@id'),
        ('/a/b/d', '/a/b'),
    ]

    # cases where the path starts with the context's steps
    JOIN_CASES = [
        ('/a/b/c', '/a/b/d'),
        ('/a/b/c', '/a/b/d[@kind]'),
        ("/a/b[@type = 'x']/c", "/a/b[@type = 'x']/d"),
        ('/a/b/c/e', '/a/b/d'),
        ('/a/b/c', '/a/b/c/@id'),
        ('/a/b/d', '/a/b'),
    ]

    def setUp(self):
        self.fixture = etree.fromstring(self.FIXTURE_TEXT)

    def test_contextualized_selects_same_nodes(self):
        doc = self.fixture.getroottree()
        for context, xpath in self.CASES:
            context_node = doc.xpath(context)[0]
            relative = contextualize(context, xpath)
            found = context_node.xpath(relative)
            # only the nodes reachable from the chosen context node
            expected = [n for n in doc.xpath(xpath) if n in found]
            self.assertTrue(found, '%s from %s' % (relative, context))
            self.assertEqual(expected, found)

    def test_join_after_contextualize(self):
        for context, xpath in self.JOIN_CASES:
            relative = contextualize(context, xpath)
            joined = join(context, relative)
            # join keeps step texts only
            self.assertEqual([s.text for s in parse(xpath).location_steps],
                             [s.text for s in parse(joined).location_steps],
                             '%s + %s' % (context, relative))


if __name__ == '__main__':
    main()
