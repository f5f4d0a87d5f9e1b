# routes/demo.py
from flask import Blueprint, render_template

demo_bp = Blueprint('demo', __name__)

DEMO_TABS = [
    {
        'label': 'Overview',
        'content': '<p>Anim pariatur cliche reprehenderit, enim eiusmod high life.</p>',
    },
    {
        'label': 'Details',
        'content': '<p>Food truck quinoa nesciunt laborum eiusmod.</p>',
        'options': {'id': 'details-pane'},
    },
    {
        'label': 'Documentation',
        'url': 'https://getbootstrap.com/docs/4.6/components/navs/',
    },
    {
        'label': 'More',
        'items': [
            {'label': 'Settings', 'content': '<p>Brunch 3 wolf moon tempor.</p>'},
            {'label': 'History', 'content': '<p>Sunt aliqua put a bird on it.</p>'},
            '-',
            {'label': 'Project site', 'url': 'https://example.com'},
        ],
    },
    {
        'label': 'Hidden',
        'content': 'Never rendered',
        'visible': False,
    },
]


@demo_bp.route('/')
def index():
    return render_template('demo/tabs.html', items=DEMO_TABS)


@demo_bp.route('/pills')
def pills():
    return render_template('demo/tabs.html', items=DEMO_TABS, nav_type='nav-pills')
