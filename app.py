import os
import math
import time
import logging
from datetime import date, datetime, timezone
from dotenv import load_dotenv
from flask import Flask, render_template, request, redirect, url_for, abort, jsonify
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import func, or_, text
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from page_templates import template_loader
from revenue import (
    PERIODS,
    RevenueRecord,
    available_years,
    build_series,
    format_currency,
    period_label,
    revenue_by_category,
    total_revenue,
)

logger = logging.getLogger(__name__)

# ==========================================
# CONFIGURATION & SETUP
# ==========================================
load_dotenv()

app = Flask(__name__)

# Default to a SQLite file in the current working directory so the DB lives
# next to the executable when packaged for desktop
basedir = os.path.abspath(os.getcwd())
app.config['SQLALCHEMY_DATABASE_URI'] = os.environ.get(
    'DATABASE_URL', 'sqlite:///' + os.path.join(basedir, 'agency.db'))
app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', 'studio-admin-dev-key')
app.config['LOG_LEVEL'] = os.environ.get('LOG_LEVEL', 'INFO').upper()
app.config['APP_HOST'] = os.environ.get('APP_HOST', '127.0.0.1')
app.config['APP_PORT'] = int(os.environ.get('APP_PORT', '5000'))
app.config['APP_VERSION'] = os.environ.get('APP_VERSION', '1.0.0')

db = SQLAlchemy(app)

DEFAULT_PERIOD = 'year'

LEAD_STATUSES = [
    ('new', 'New'),
    ('contacted', 'Contacted'),
    ('qualified', 'Qualified'),
    ('won', 'Won'),
    ('lost', 'Lost'),
]
LEAD_STATUS_VALUES = [value for value, _ in LEAD_STATUSES]

LEAD_SOURCES = ['Website', 'Referral', 'Cold Call', 'LinkedIn', 'Email Campaign', 'Trade Show', 'Other']

DEFAULT_CATEGORIES = ['AI Agents', 'Automation', 'Integrations', 'Web Development']


def _utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


# ==========================================
# DATABASE MODELS
# ==========================================
class Project(db.Model):
    """Portfolio project; revenue and project_date feed the dashboard chart"""
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, default='')
    category = db.Column(db.String(100), nullable=False)
    revenue = db.Column(db.Float, default=0)
    project_date = db.Column(db.String(20), nullable=False)  # YYYY-MM-DD
    is_published = db.Column(db.Boolean, default=False)
    display_order = db.Column(db.Integer, default=0)
    created_at = db.Column(db.DateTime, default=_utcnow)


class Service(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, default='')
    icon = db.Column(db.String(50))
    is_published = db.Column(db.Boolean, default=True)
    display_order = db.Column(db.Integer, default=0)
    created_at = db.Column(db.DateTime, default=_utcnow)


class Client(db.Model):
    """Client shown in the website's logo strip"""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    logo_text = db.Column(db.String(100))
    is_published = db.Column(db.Boolean, default=True)
    display_order = db.Column(db.Integer, default=0)
    created_at = db.Column(db.DateTime, default=_utcnow)


class Category(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False)
    created_at = db.Column(db.DateTime, default=_utcnow)


class Lead(db.Model):
    """Sales lead tracked through new -> contacted -> qualified -> won/lost"""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255))
    phone = db.Column(db.String(50))
    company = db.Column(db.String(255))
    status = db.Column(db.String(20), default='new')
    value = db.Column(db.Float, default=0)
    source = db.Column(db.String(100))
    notes = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=_utcnow)


# Register templates in memory
app.jinja_loader = template_loader()
# Templates have no .html suffix, so autoescaping must be switched on explicitly
app.jinja_env.autoescape = True


@app.context_processor
def inject_globals():
    return {'current_year': date.today().year, 'format_currency': format_currency}


# ==========================================
# FORM HELPERS
# ==========================================
def _required(field, max_length=255):
    value = (request.form.get(field) or '').strip()
    if not value:
        abort(400, description=f"{field} is required")
    if len(value) > max_length:
        abort(400, description=f"{field} is too long")
    return value


def _optional(field):
    value = (request.form.get(field) or '').strip()
    return value or None


def _amount(field):
    raw = (request.form.get(field) or '').strip()
    if not raw:
        return 0.0
    try:
        value = float(raw)
    except ValueError:
        abort(400, description=f"{field} must be a number")
    if not math.isfinite(value) or value < 0:
        abort(400, description=f"{field} must be a non-negative number")
    return value


def _form_date(field):
    raw = (request.form.get(field) or '').strip()
    if not raw:
        return date.today().isoformat()
    try:
        return date.fromisoformat(raw).isoformat()
    except ValueError:
        abort(400, description=f"{field} must be a YYYY-MM-DD date")


def _lead_status(raw):
    status = (raw or '').strip() or 'new'
    if status not in LEAD_STATUS_VALUES:
        abort(400, description=f"status must be one of {', '.join(LEAD_STATUS_VALUES)}")
    return status


# ==========================================
# DASHBOARD DATA
# ==========================================
def revenue_records():
    rows = db.session.query(Project.project_date, Project.revenue).all()
    return [RevenueRecord(date=row.project_date, amount=row.revenue) for row in rows]


def selected_period():
    period = request.args.get('period', DEFAULT_PERIOD)
    if period not in PERIODS:
        logger.debug("Unknown period %r, falling back to %s", period, DEFAULT_PERIOD)
        period = DEFAULT_PERIOD
    year = request.args.get('year', type=int)
    if year is None or not date.min.year <= year <= date.max.year:
        year = date.today().year
    return period, year


def content_counts():
    return [
        {'title': 'Projects', 'href': '/projects', 'count': Project.query.count(),
         'published': Project.query.filter_by(is_published=True).count()},
        {'title': 'Services', 'href': '/services', 'count': Service.query.count(),
         'published': Service.query.filter_by(is_published=True).count()},
        {'title': 'Clients', 'href': '/clients', 'count': Client.query.count(),
         'published': Client.query.filter_by(is_published=True).count()},
        {'title': 'Categories', 'href': '/categories', 'count': Category.query.count(), 'published': None},
        {'title': 'Leads', 'href': '/leads', 'count': Lead.query.count(), 'published': None},
    ]


def lead_pipeline():
    stats = {status: 0 for status in LEAD_STATUS_VALUES}
    total_value = 0.0
    for status, value in db.session.query(Lead.status, Lead.value).all():
        if status in stats:
            stats[status] += 1
        total_value += value or 0
    return stats, total_value


# ==========================================
# ROUTES & LOGIC
# ==========================================

@app.route('/')
def home():
    return render_template('home', page='home')


@app.route('/dashboard')
def dashboard():
    period, year = selected_period()

    records = revenue_records()
    series = build_series(records, period, reference_year=year)
    years = sorted(set(available_years(records)) | {year}, reverse=True)

    categories = revenue_by_category(
        db.session.query(Project.category, Project.revenue).all())

    lead_stats, pipeline_value = lead_pipeline()
    recent_leads = Lead.query.order_by(Lead.created_at.desc()).limit(5).all()

    return render_template(
        'dashboard',
        page='dashboard',
        stats=content_counts(),
        period=period,
        selected_year=year,
        years=years,
        selected_label=period_label(period, year),
        total_revenue=format_currency(total_revenue(series)),
        revenue_series=[point.to_dict() for point in series],
        category_labels=[name for name, _ in categories],
        category_data=[value for _, value in categories],
        top_categories=[(name, format_currency(value)) for name, value in categories[:5]],
        lead_count=sum(lead_stats.values()),
        lead_stats=lead_stats,
        lead_statuses=LEAD_STATUSES,
        pipeline_value=format_currency(pipeline_value),
        recent_leads=recent_leads,
    )


# --- PROJECT ROUTES ---
@app.route('/projects')
def projects():
    all_projects = Project.query.order_by(Project.project_date.desc(), Project.id.desc()).all()
    all_categories = Category.query.order_by(Category.name).all()
    return render_template('projects', page='projects', projects=all_projects, categories=all_categories)


@app.route('/add_project', methods=['POST'])
def add_project():
    new_project = Project(
        title=_required('title', 200),
        description=_optional('description') or '',
        category=_required('category', 100),
        revenue=_amount('revenue'),
        project_date=_form_date('project_date'),
        is_published=bool(request.form.get('is_published')),
    )
    db.session.add(new_project)
    db.session.commit()
    logger.info("Added project %s (%s)", new_project.id, new_project.title)
    return redirect(url_for('projects'))


@app.route('/toggle_project/<int:id>')
def toggle_project(id):
    project = db.get_or_404(Project, id)
    project.is_published = not project.is_published
    db.session.commit()
    return redirect(url_for('projects'))


@app.route('/delete_project/<int:id>')
def delete_project(id):
    project = db.get_or_404(Project, id)
    db.session.delete(project)
    db.session.commit()
    logger.info("Deleted project %s", id)
    return redirect(url_for('projects'))


# --- SERVICE ROUTES ---
@app.route('/services')
def services():
    all_services = Service.query.order_by(Service.display_order, Service.id).all()
    return render_template('services', page='services', services=all_services)


@app.route('/add_service', methods=['POST'])
def add_service():
    new_service = Service(
        title=_required('title', 200),
        description=_optional('description') or '',
        icon=_optional('icon'),
    )
    db.session.add(new_service)
    db.session.commit()
    logger.info("Added service %s (%s)", new_service.id, new_service.title)
    return redirect(url_for('services'))


@app.route('/delete_service/<int:id>')
def delete_service(id):
    service = db.get_or_404(Service, id)
    db.session.delete(service)
    db.session.commit()
    logger.info("Deleted service %s", id)
    return redirect(url_for('services'))


# --- CLIENT ROUTES ---
@app.route('/clients')
def clients():
    all_clients = Client.query.order_by(Client.created_at.desc()).all()
    return render_template('clients', page='clients', clients=all_clients)


@app.route('/add_client', methods=['POST'])
def add_client():
    name = _required('name', 100)
    new_client = Client(
        name=name,
        logo_text=_optional('logo_text') or name,
        is_published=bool(request.form.get('is_published')),
    )
    db.session.add(new_client)
    db.session.commit()
    logger.info("Added client %s (%s)", new_client.id, new_client.name)
    return redirect(url_for('clients'))


@app.route('/toggle_client/<int:id>')
def toggle_client(id):
    client = db.get_or_404(Client, id)
    client.is_published = not client.is_published
    db.session.commit()
    return redirect(url_for('clients'))


@app.route('/delete_client/<int:id>')
def delete_client(id):
    client = db.get_or_404(Client, id)
    db.session.delete(client)
    db.session.commit()
    logger.info("Deleted client %s", id)
    return redirect(url_for('clients'))


# --- CATEGORY ROUTES ---
def _unique_category_name(name, exclude_id=None):
    existing = Category.query.filter(func.lower(Category.name) == name.lower()).first()
    if existing is not None and existing.id != exclude_id:
        abort(409, description=f"Category '{name}' already exists")
    return name


@app.route('/categories')
def categories():
    all_categories = Category.query.order_by(Category.name).all()
    project_counts = dict(
        db.session.query(Project.category, func.count(Project.id)).group_by(Project.category).all())
    return render_template('categories', page='categories', categories=all_categories,
                           project_counts=project_counts)


@app.route('/add_category', methods=['POST'])
def add_category():
    new_category = Category(name=_unique_category_name(_required('name', 100)))
    db.session.add(new_category)
    db.session.commit()
    logger.info("Added category %s (%s)", new_category.id, new_category.name)
    return redirect(url_for('categories'))


@app.route('/rename_category/<int:id>', methods=['POST'])
def rename_category(id):
    category = db.get_or_404(Category, id)
    old_name = category.name
    category.name = _unique_category_name(_required('name', 100), exclude_id=id)
    # Projects store the category by name
    Project.query.filter_by(category=old_name).update({'category': category.name})
    db.session.commit()
    logger.info("Renamed category %s from %s to %s", id, old_name, category.name)
    return redirect(url_for('categories'))


@app.route('/delete_category/<int:id>')
def delete_category(id):
    category = db.get_or_404(Category, id)
    db.session.delete(category)
    db.session.commit()
    logger.info("Deleted category %s", id)
    return redirect(url_for('categories'))


# --- LEAD ROUTES ---
@app.route('/leads')
def leads():
    status = request.args.get('status', '')
    query = request.args.get('q', '').strip()

    lead_query = Lead.query
    if status in LEAD_STATUS_VALUES:
        lead_query = lead_query.filter(Lead.status == status)
    if query:
        pattern = f"%{query}%"
        lead_query = lead_query.filter(or_(
            Lead.name.ilike(pattern),
            Lead.email.ilike(pattern),
            Lead.company.ilike(pattern),
        ))

    return render_template(
        'leads',
        page='leads',
        leads=lead_query.order_by(Lead.created_at.desc()).all(),
        lead_statuses=LEAD_STATUSES,
        lead_sources=LEAD_SOURCES,
        selected_status=status,
        query=query,
    )


@app.route('/add_lead', methods=['POST'])
def add_lead():
    new_lead = Lead(
        name=_required('name'),
        email=_optional('email'),
        phone=_optional('phone'),
        company=_optional('company'),
        status=_lead_status(request.form.get('status')),
        value=_amount('value'),
        source=_optional('source'),
        notes=_optional('notes'),
    )
    db.session.add(new_lead)
    db.session.commit()
    logger.info("Added lead %s (%s)", new_lead.id, new_lead.name)
    return redirect(url_for('leads'))


@app.route('/update_lead/<int:id>', methods=['POST'])
def update_lead(id):
    lead = db.get_or_404(Lead, id)
    lead.status = _lead_status(request.form.get('status'))
    if request.form.get('value') is not None:
        lead.value = _amount('value')
    db.session.commit()
    logger.info("Lead %s moved to %s", id, lead.status)
    return redirect(url_for('leads'))


@app.route('/delete_lead/<int:id>')
def delete_lead(id):
    lead = db.get_or_404(Lead, id)
    db.session.delete(lead)
    db.session.commit()
    logger.info("Deleted lead %s", id)
    return redirect(url_for('leads'))


# --- JSON ROUTES ---
@app.route('/api/revenue')
def api_revenue():
    period, year = selected_period()
    series = build_series(revenue_records(), period, reference_year=year)
    return jsonify({
        'period': period,
        'year': year if period == 'year' else None,
        'label': period_label(period, year),
        'total': total_revenue(series),
        'series': [point.to_dict() for point in series],
    })


@app.route('/api/health')
def api_health():
    health = {
        'status': 'healthy',
        'timestamp': datetime.now(timezone.utc).isoformat(),
        'version': app.config['APP_VERSION'],
        'checks': {'database': {'status': 'down'}},
    }

    started = time.perf_counter()
    try:
        with db.engine.connect() as conn:
            try:
                conn.execute(text('SELECT id FROM category LIMIT 1'))
                health['checks']['database'] = {'status': 'up'}
            except SQLAlchemyError:
                logger.warning("Health probe query failed", exc_info=True)
                health['checks']['database'] = {'status': 'down', 'error': 'Query failed'}
                health['status'] = 'degraded'
        health['checks']['database']['latency'] = round((time.perf_counter() - started) * 1000, 2)
    except OperationalError:
        logger.error("Health probe could not reach the database", exc_info=True)
        health['checks']['database'] = {'status': 'down', 'error': 'Connection failed'}
        health['status'] = 'unhealthy'

    return jsonify(health), 503 if health['status'] == 'unhealthy' else 200


# --- ERRORS ---
@app.errorhandler(400)
@app.errorhandler(404)
@app.errorhandler(409)
def http_error(error):
    if request.path.startswith('/api/'):
        return jsonify({'error': error.description}), error.code
    return render_template('error', page=None, code=error.code, message=error.description), error.code


# ==========================================
# INITIALIZATION HELPERS (for desktop + dev)
# ==========================================
def seed_categories():
    db.session.add_all(Category(name=name) for name in DEFAULT_CATEGORIES)
    db.session.commit()
    logger.info("Seeded %d default categories", len(DEFAULT_CATEGORIES))


def init_db():
    """Create/repair schema and seed initial data."""
    with app.app_context():
        try:
            db.create_all()
            Project.query.first()
            Lead.query.first()
        except OperationalError:
            logger.warning("Schema mismatch, rebuilding tables")
            db.drop_all()
            db.create_all()

        if Category.query.count() == 0:
            seed_categories()


def run_flask():
    """Initialize DB and run the Flask server (for desktop wrapper or dev)."""
    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    init_db()
    logger.info("Starting server on %s:%s", app.config['APP_HOST'], app.config['APP_PORT'])
    app.run(
        host=app.config['APP_HOST'],
        port=app.config['APP_PORT'],
        debug=False
    )


if __name__ == '__main__':
    # Development mode: run with Python directly
    run_flask()
