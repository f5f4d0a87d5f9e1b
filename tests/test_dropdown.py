"""
Tests for the Dropdown widget.
"""

import pytest
from bs4 import BeautifulSoup

from navtabs.core.dropdown import Dropdown
from navtabs.core.exceptions import InvalidConfigError
from navtabs.core.view import POS_READY


def soup(html):
    return BeautifulSoup(str(html), 'html.parser')


class TestItems:

    def test_links(self, view):
        html = Dropdown.widget(view=view, items=[
            {'label': 'One', 'url': '/one'},
            {'label': 'Two', 'url': '/two', 'active': True},
        ])
        assert html == (
            '<div id="w0" class="dropdown-menu">'
            '<a class="dropdown-item" href="/one">One</a>\n'
            '<a class="dropdown-item active" href="/two">Two</a>'
            '</div>'
        )

    def test_divider_and_raw_strings(self, view):
        doc = soup(Dropdown.widget(view=view, items=['-', '<span class="raw">raw</span>']))
        assert doc.find('div', class_='dropdown-divider') is not None
        assert doc.find('span', class_='raw').text == 'raw'

    def test_header(self, view):
        doc = soup(Dropdown.widget(view=view, items=[{'label': 'Section'}]))
        assert doc.h6['class'] == ['dropdown-header']
        assert doc.h6.text == 'Section'

    def test_disabled(self, view):
        doc = soup(Dropdown.widget(view=view, items=[{'label': 'Off', 'url': '/off', 'disabled': True}]))
        link = doc.a
        assert link['class'] == ['dropdown-item', 'disabled']
        assert link['tabindex'] == '-1'
        assert link['aria-disabled'] == 'true'

    def test_item_options_merged_into_link(self, view):
        doc = soup(Dropdown.widget(view=view, items=[
            {'label': 'One', 'url': '/one', 'options': {'class': 'extra', 'title': 'Hint'},
             'link_options': {'title': 'Link title'}},
        ]))
        assert doc.a['class'] == ['dropdown-item', 'extra']
        assert doc.a['title'] == 'Link title'

    def test_invisible_items_skipped(self, view):
        doc = soup(Dropdown.widget(view=view, items=[
            {'label': 'Gone', 'url': '/gone', 'visible': False},
            {'label': 'Here', 'url': '/here'},
        ]))
        assert [link.text for link in doc.find_all('a')] == ['Here']

    def test_labels_encoded(self, view):
        html = Dropdown.widget(view=view, items=[{'label': '<x>', 'url': '/'}])
        assert '&lt;x&gt;' in html

    def test_label_encoding_disabled(self, view):
        html = Dropdown.widget(view=view, encode_labels=False, items=[{'label': '<em>x</em>', 'url': '/'}])
        assert '<em>x</em>' in html

    def test_missing_label(self, view):
        with pytest.raises(InvalidConfigError):
            Dropdown.widget(view=view, items=[{'url': '/'}])


class TestPlugin:

    def test_plugin_call_registered(self, view):
        Dropdown.widget(view=view, items=[])
        assert list(view.js[POS_READY].values()) == ["jQuery('#w0').dropdown();"]

    def test_plugin_options(self, view):
        Dropdown.widget(view=view, items=[], client_options={'display': 'static'})
        assert list(view.js[POS_READY].values()) == ['jQuery(\'#w0\').dropdown({"display": "static"});']

    def test_plugin_call_disabled(self, view):
        Dropdown.widget(view=view, items=[], client_options=False)
        assert view.js[POS_READY] == {}
        assert 'bootstrap-plugin' in view.registered_bundles
