"""
Tests for the view context: widget ids, asset bundles, registered
scripts and their rendering, plus JavaScript value encoding.
"""

import pytest

from navtabs.core.assets import BOOTSTRAP_CSS_URL, BOOTSTRAP_JS_URL, JQUERY_URL, default_bundles
from navtabs.core.exceptions import InvalidConfigError
from navtabs.core.js import JsExpression, encode_js
from navtabs.core.view import POS_END, POS_HEAD, POS_LOAD, View, current_view


class TestWidgetIds:

    def test_sequential_ids(self, view):
        assert view.next_widget_id() == 'w0'
        assert view.next_widget_id() == 'w1'

    def test_custom_prefix(self):
        assert View(auto_id_prefix='tabs').next_widget_id() == 'tabs0'

    def test_views_do_not_share_counters(self):
        View().next_widget_id()
        assert View().next_widget_id() == 'w0'


class TestAssetBundles:

    def test_dependencies_registered_first(self, view):
        view.register_asset_bundle('bootstrap-plugin')
        assert view.registered_bundles == ['jquery', 'bootstrap', 'bootstrap-plugin']

    def test_registration_is_idempotent(self, view):
        view.register_asset_bundle('bootstrap-plugin')
        view.register_asset_bundle('bootstrap-plugin')
        view.register_asset_bundle('jquery')
        assert view.registered_bundles == ['jquery', 'bootstrap', 'bootstrap-plugin']

    def test_unknown_bundle(self, view):
        with pytest.raises(InvalidConfigError):
            view.register_asset_bundle('missing')

    def test_config_overrides_urls(self):
        bundles = default_bundles({'NAVTABS_JQUERY_URL': '/static/jquery.js'})
        assert bundles['jquery'].js == ['/static/jquery.js']
        assert bundles['bootstrap'].css == [BOOTSTRAP_CSS_URL]


class TestRegisteredScripts:

    def test_identical_scripts_emitted_once(self, view):
        view.register_js('foo();')
        view.register_js('foo();')
        assert view.render_body_end().count('foo();') == 1

    def test_same_key_replaces(self, view):
        view.register_js('first();', key='init')
        view.register_js('second();', key='init')
        html = view.render_body_end()
        assert 'first();' not in html
        assert 'second();' in html

    def test_ready_scripts_wrapped(self, view):
        view.register_js('foo();')
        assert 'jQuery(function ($) {\nfoo();\n});' in view.render_body_end()

    def test_load_scripts_wrapped(self, view):
        view.register_js('bar();', POS_LOAD)
        assert "jQuery(window).on('load', function () {\nbar();\n});" in view.render_body_end()

    def test_end_scripts_precede_ready(self, view):
        view.register_js('ready();')
        view.register_js('end();', POS_END)
        html = view.render_body_end()
        assert html.index('end();') < html.index('ready();')

    def test_head_scripts(self, view):
        view.register_js('head();', POS_HEAD)
        assert '<script>head();</script>' in view.render_head()

    def test_nothing_registered(self, view):
        assert view.render_head() == ''
        assert view.render_body_begin() == ''
        assert view.render_body_end() == ''


class TestRenderAssets:

    def test_stylesheets_in_head(self, view):
        view.register_asset_bundle('bootstrap-plugin')
        assert view.render_head() == f'<link href="{BOOTSTRAP_CSS_URL}" rel="stylesheet">'

    def test_script_files_in_dependency_order(self, view):
        view.register_asset_bundle('bootstrap-plugin')
        html = view.render_body_end()
        assert html.index(JQUERY_URL) < html.index(BOOTSTRAP_JS_URL)
        assert f'<script src="{JQUERY_URL}"></script>' in html


class TestCurrentView:

    def test_none_outside_app_context(self):
        assert current_view() is None

    def test_one_view_per_context(self, app):
        with app.app_context():
            assert current_view() is current_view()

    def test_built_from_app_config(self, app):
        app.config['NAVTABS_AUTO_ID_PREFIX'] = 'nt'
        app.config['NAVTABS_BOOTSTRAP_JS_URL'] = '/static/bootstrap.js'
        with app.app_context():
            view = current_view()
            assert view.next_widget_id() == 'nt0'
            assert view.bundles['bootstrap-plugin'].js == ['/static/bootstrap.js']


class TestEncodeJs:

    def test_plain_values(self):
        assert encode_js({'display': 'static'}) == '{"display": "static"}'

    def test_expressions_are_embedded_verbatim(self):
        encoded = encode_js({'a': JsExpression('function () {}'), 'b': [1, 'x']})
        assert encoded == '{"a": function () {}, "b": [1, "x"]}'
