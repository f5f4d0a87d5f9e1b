"""
Integration tests for the Flask application and the Jinja integration.
"""

import pytest
from bs4 import BeautifulSoup
from flask import render_template_string

from navtabs.core.assets import BOOTSTRAP_CSS_URL, BOOTSTRAP_JS_URL, JQUERY_URL
from navtabs.extension import BODY_BEGIN_PLACEHOLDER, HEAD_PLACEHOLDER


def soup(resp):
    return BeautifulSoup(resp.get_data(as_text=True), 'html.parser')


class TestDemoPage:
    """Test GET /demo/."""

    def test_renders_tabs(self, client):
        resp = client.get('/demo/')
        assert resp.status_code == 200
        doc = soup(resp)
        nav = doc.find('ul', id='demo-tabs')
        assert nav['class'] == ['nav', 'nav-tabs']
        assert nav['role'] == 'tablist'
        headers = nav.find_all('li', recursive=False)
        assert len(headers) == 4
        assert 'active' in headers[0].a['class']

    def test_panes(self, client):
        doc = soup(client.get('/demo/'))
        content = doc.find('div', class_='tab-content')
        assert content.find(id='demo-tabs-tab0')['class'] == ['tab-pane', 'active', 'show']
        assert content.find(id='details-pane') is not None
        assert content.find(id='demo-tabs-dd3-tab0') is not None
        assert 'Never rendered' not in str(doc)

    def test_dropdown_menu(self, client):
        doc = soup(client.get('/demo/'))
        menu = doc.find('div', class_='dropdown-menu')
        assert menu.find('div', class_='dropdown-divider') is not None
        assert menu.find('a', string='Project site')['href'] == 'https://example.com'

    def test_assets_and_scripts(self, client):
        html = client.get('/demo/').get_data(as_text=True)
        assert HEAD_PLACEHOLDER not in html
        assert BODY_BEGIN_PLACEHOLDER not in html
        assert f'<link href="{BOOTSTRAP_CSS_URL}" rel="stylesheet">' in html
        assert html.index(JQUERY_URL) < html.index(BOOTSTRAP_JS_URL)
        assert "jQuery('#demo-tabs').on('shown.bs.tab', 'a'," in html

    def test_pills(self, client):
        doc = soup(client.get('/demo/pills'))
        assert doc.find('ul', id='demo-tabs')['class'] == ['nav', 'nav-pills']

    def test_asset_urls_from_config(self, app):
        app.config['NAVTABS_BOOTSTRAP_CSS_URL'] = '/static/bootstrap.css'
        html = app.test_client().get('/demo/').get_data(as_text=True)
        assert '<link href="/static/bootstrap.css" rel="stylesheet">' in html


class TestJinjaGlobals:

    def test_default_nav_type_from_config(self, app):
        app.config['NAVTABS_NAV_TYPE'] = 'nav-pills'
        with app.test_request_context():
            html = render_template_string("{{ tabs(items=items) }}", items=[{'label': 'A'}])
        assert 'class="nav nav-pills"' in html

    def test_encode_labels_from_config(self, app):
        app.config['NAVTABS_ENCODE_LABELS'] = False
        with app.test_request_context():
            html = render_template_string("{{ nav(items=items) }}", items=[{'label': '<b>A</b>', 'url': '/a'}])
        assert '<b>A</b>' in html

    def test_widgets_share_request_view(self, app):
        with app.test_request_context():
            html = render_template_string(
                "{{ dropdown(items=[]) }}{{ dropdown(items=[]) }}{{ navtabs_scripts() }}"
            )
        assert 'id="w0"' in html
        assert 'id="w1"' in html
        assert "jQuery('#w1').dropdown();" in html

    def test_page_without_widgets(self, app):
        @app.route('/plain')
        def plain():
            return render_template_string("<head>{{ navtabs_head() }}</head><body>ok</body>")

        html = app.test_client().get('/plain').get_data(as_text=True)
        assert html == '<head></head><body>ok</body>'


class TestErrors:

    def test_invalid_widget_config(self, app):
        @app.route('/broken')
        def broken():
            return render_template_string("{{ tabs(items=[{'content': 'no label'}]) }}")

        resp = app.test_client().get('/broken')
        assert resp.status_code == 500
        data = resp.get_json()
        assert data['error'] == 'Invalid Widget Configuration'
        assert data['message'] == "The 'label' option is required."

    def test_not_found(self, client):
        resp = client.get('/missing')
        assert resp.status_code == 404
        assert resp.get_json()['status_code'] == 404


class TestHealth:

    def test_health(self, client):
        resp = client.get('/health')
        assert resp.status_code == 200
        data = resp.get_json()
        assert data['status'] == 'healthy'
        assert data['version'] == '1.0.0'
