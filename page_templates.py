import jinja2

# ==========================================
# HTML TEMPLATES
# ==========================================

BASE_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Studio Admin | Back Office</title>
    <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.0/dist/css/bootstrap.min.css" rel="stylesheet">
    <script src="https://cdn.jsdelivr.net/npm/chart.js"></script>
    <link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/bootstrap-icons@1.10.0/font/bootstrap-icons.css">
    <style>
        body { background-color: #f7f7f7; font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; }
        .sidebar { min-height: 100vh; background: #111111; color: white; }
        .nav-link { color: #bbbbbb; margin-bottom: 5px; }
        .nav-link:hover, .nav-link.active { color: white; background: #333333; border-radius: 5px; }
        .card { border: 1px solid #e5e5e5; border-radius: 12px; box-shadow: none; }
        .stat-card .count { font-size: 1.6rem; font-weight: 600; }
        .btn-primary { background-color: #111111; border: none; }
        .btn-primary:hover { background-color: #333333; }
        .lead-new { background: #dbeafe; color: #1d4ed8; }
        .lead-contacted { background: #fef9c3; color: #a16207; }
        .lead-qualified { background: #f3e8ff; color: #7e22ce; }
        .lead-won { background: #dcfce7; color: #15803d; }
        .lead-lost { background: #f3f4f6; color: #6b7280; }
    </style>
</head>
<body>
    <div class="container-fluid">
        <div class="row">
            <!-- Sidebar -->
            <div class="col-md-2 sidebar p-3">
                <h3 class="text-center mb-4 fw-bold"><i class="bi bi-cpu"></i> Studio</h3>
                <ul class="nav flex-column">
                    {% for key, href, icon, title in [
                        ('home', '/', 'bi-house-door', 'Home'),
                        ('dashboard', '/dashboard', 'bi-graph-up', 'Dashboard'),
                        ('projects', '/projects', 'bi-kanban', 'Projects'),
                        ('services', '/services', 'bi-briefcase', 'Services'),
                        ('clients', '/clients', 'bi-people', 'Clients'),
                        ('categories', '/categories', 'bi-tags', 'Categories'),
                        ('leads', '/leads', 'bi-person-check', 'Leads'),
                    ] %}
                    <li class="nav-item">
                        <a class="nav-link {% if page == key %}active{% endif %}" href="{{ href }}">
                            <i class="bi {{ icon }} me-2"></i> {{ title }}
                        </a>
                    </li>
                    {% endfor %}
                </ul>
                <hr>
                <div class="mt-auto text-center text-muted small">
                    &copy; {{ current_year }} Studio Admin
                </div>
            </div>

            <!-- Main Content -->
            <div class="col-md-10 p-4">
                {% block content %}{% endblock %}
            </div>
        </div>
    </div>
    <script src="https://cdn.jsdelivr.net/npm/bootstrap@5.3.0/dist/js/bootstrap.bundle.min.js"></script>
</body>
</html>
"""

HOME_TEMPLATE = """
{% extends "base" %}
{% block content %}
<div class="container">
    <div class="row align-items-center justify-content-center text-center" style="height: 80vh;">
        <div class="col-md-8">
            <h1 class="display-5 fw-bold mb-3">Back office</h1>
            <p class="lead text-muted mb-5">Manage projects, services, clients and the sales pipeline.</p>
            <div class="d-flex gap-3 justify-content-center">
                <a href="/dashboard" class="btn btn-outline-dark btn-lg px-4"><i class="bi bi-graph-up"></i> Dashboard</a>
                <a href="/projects" class="btn btn-primary btn-lg px-4"><i class="bi bi-plus-circle"></i> Add Project</a>
                <a href="/leads" class="btn btn-outline-dark btn-lg px-4"><i class="bi bi-person-plus"></i> Add Lead</a>
            </div>
        </div>
    </div>
</div>
{% endblock %}
"""

DASHBOARD_TEMPLATE = """
{% extends "base" %}
{% block content %}
<div class="mb-4">
    <h2 class="fw-bold m-0">Dashboard</h2>
    <p class="text-muted small">Overview of your content and activity</p>
</div>

<!-- Content Counts -->
<div class="row mb-4">
    {% for stat in stats %}
    <div class="col-md-4 mb-3">
        <a href="{{ stat.href }}" class="text-decoration-none text-dark">
            <div class="card stat-card p-3 h-100">
                <div class="count">{{ stat.count }}</div>
                <div class="small text-muted">
                    {{ stat.title }}
                    {% if stat.published is not none and stat.count > 0 %}
                    <span class="text-secondary"> &middot; {{ stat.published }} live</span>
                    {% endif %}
                </div>
            </div>
        </a>
    </div>
    {% endfor %}
</div>

<!-- Charts Row -->
<div class="row">
    <div class="col-md-8 mb-4">
        <div class="card p-4 h-100">
            <div class="d-flex justify-content-between align-items-center mb-3">
                <div>
                    <h5 class="m-0">Revenue</h5>
                    <span class="small text-muted">{{ selected_label }}</span>
                </div>
                <form action="/dashboard" method="GET" class="d-flex align-items-center gap-2">
                    <select name="period" class="form-select form-select-sm" style="width: auto;" onchange="this.form.submit()">
                        <option value="month" {% if period == 'month' %}selected{% endif %}>1M</option>
                        <option value="year" {% if period == 'year' %}selected{% endif %}>1Y</option>
                        <option value="lifetime" {% if period == 'lifetime' %}selected{% endif %}>All</option>
                    </select>
                    {% if period == 'year' and years %}
                    <select name="year" class="form-select form-select-sm" style="width: auto;" onchange="this.form.submit()">
                        {% for y in years %}
                        <option value="{{ y }}" {% if y == selected_year %}selected{% endif %}>{{ y }}</option>
                        {% endfor %}
                    </select>
                    {% endif %}
                    <span class="fw-bold ms-2" id="revenueTotal">{{ total_revenue }}</span>
                </form>
            </div>
            <div style="height: 300px;">
                <canvas id="revenueChart"></canvas>
            </div>
        </div>
    </div>
    <div class="col-md-4 mb-4">
        <div class="card p-4 h-100">
            <h5>Revenue by Category</h5>
            {% if category_labels %}
            <div style="height: 220px;">
                <canvas id="categoryChart"></canvas>
            </div>
            <ul class="list-unstyled small mt-3 mb-0">
                {% for name, value in top_categories %}
                <li class="d-flex justify-content-between"><span>{{ name }}</span><span class="fw-bold">{{ value }}</span></li>
                {% endfor %}
            </ul>
            {% else %}
            <div class="text-center text-muted py-5">No categorised revenue yet.</div>
            {% endif %}
        </div>
    </div>
</div>

<!-- Lead Pipeline -->
{% if lead_count > 0 %}
<div class="card p-4 mb-4">
    <div class="d-flex justify-content-between align-items-center mb-3">
        <h5 class="m-0">Leads</h5>
        <span class="small text-muted">{{ lead_count }} total &middot; {{ pipeline_value }} pipeline</span>
    </div>
    <div class="row text-center mb-3">
        {% for status, label in lead_statuses %}
        <div class="col">
            <div class="fw-bold fs-4">{{ lead_stats[status] }}</div>
            <span class="badge lead-{{ status }}">{{ label }}</span>
        </div>
        {% endfor %}
    </div>
    <table class="table table-sm mb-0 align-middle">
        <tbody>
            {% for lead in recent_leads %}
            <tr>
                <td class="fw-bold">{{ lead.name }}</td>
                <td class="text-muted">{{ lead.company or '' }}</td>
                <td><span class="badge lead-{{ lead.status }}">{{ lead.status|capitalize }}</span></td>
                <td class="text-end">{{ format_currency(lead.value) }}</td>
            </tr>
            {% endfor %}
        </tbody>
    </table>
</div>
{% endif %}

<script>
    const revenueSeries = {{ revenue_series | tojson }};
    const ctxRev = document.getElementById('revenueChart').getContext('2d');

    new Chart(ctxRev, {
        type: 'line',
        data: {
            labels: revenueSeries.map(p => p.label),
            datasets: [{
                label: 'Total',
                data: revenueSeries.map(p => p.cumulative),
                borderColor: '#111111',
                tension: 0.3,
                fill: true,
                pointRadius: 0,
                backgroundColor: 'rgba(17, 17, 17, 0.05)'
            }]
        },
        options: {
            responsive: true,
            maintainAspectRatio: false,
            scales: {
                y: { beginAtZero: true, grid: { borderDash: [2, 4] } },
                x: { grid: { display: false }, ticks: { autoSkip: false } }
            },
            plugins: {
                legend: { display: false },
                tooltip: {
                    callbacks: {
                        title: function(items) { return revenueSeries[items[0].dataIndex].date; },
                        label: function(context) { return '$' + context.parsed.y.toLocaleString(); }
                    }
                }
            }
        }
    });

    {% if category_labels %}
    new Chart(document.getElementById('categoryChart').getContext('2d'), {
        type: 'doughnut',
        data: {
            labels: {{ category_labels | tojson }},
            datasets: [{
                data: {{ category_data | tojson }},
                backgroundColor: ['#111111', '#333333', '#555555', '#777777', '#999999', '#bbbbbb', '#dddddd'],
                borderWidth: 0
            }]
        },
        options: {
            responsive: true,
            maintainAspectRatio: false,
            cutout: '70%',
            plugins: { legend: { display: false } }
        }
    });
    {% endif %}
</script>
{% endblock %}
"""

PROJECTS_TEMPLATE = """
{% extends "base" %}
{% block content %}
<div class="d-flex justify-content-between align-items-center mb-4">
    <h2 class="fw-bold">Projects</h2>
    <button class="btn btn-primary" data-bs-toggle="modal" data-bs-target="#addProjectModal">
        <i class="bi bi-plus-lg"></i> New Project
    </button>
</div>

<div class="card p-0 overflow-hidden">
    <div class="table-responsive">
        <table class="table table-hover mb-0 align-middle">
            <thead class="table-light">
                <tr>
                    <th>Status</th>
                    <th>Project</th>
                    <th>Category</th>
                    <th>Date</th>
                    <th>Revenue</th>
                    <th class="text-end">Actions</th>
                </tr>
            </thead>
            <tbody>
                {% for project in projects %}
                <tr>
                    <td>
                        {% if project.is_published %}
                        <span class="badge bg-success rounded-pill">Live</span>
                        {% else %}
                        <span class="badge bg-secondary rounded-pill">Draft</span>
                        {% endif %}
                    </td>
                    <td class="fw-bold">{{ project.title }}</td>
                    <td><span class="badge border text-dark bg-light">{{ project.category }}</span></td>
                    <td>{{ project.project_date }}</td>
                    <td>{{ format_currency(project.revenue) }}</td>
                    <td class="text-end">
                        <a href="/toggle_project/{{ project.id }}" class="btn btn-sm btn-outline-dark me-1" title="Publish / Unpublish">
                            <i class="bi bi-eye"></i>
                        </a>
                        <a href="/delete_project/{{ project.id }}" class="btn btn-sm btn-outline-danger" title="Delete" onclick="return confirm('Delete this project?')">
                            <i class="bi bi-trash"></i>
                        </a>
                    </td>
                </tr>
                {% else %}
                <tr>
                    <td colspan="6" class="text-center py-4 text-muted">
                        <i class="bi bi-inbox display-6 d-block mb-2"></i>
                        No projects yet.
                    </td>
                </tr>
                {% endfor %}
            </tbody>
        </table>
    </div>
</div>

<div class="modal fade" id="addProjectModal" tabindex="-1">
    <div class="modal-dialog">
        <div class="modal-content">
            <div class="modal-header">
                <h5 class="modal-title">New Project</h5>
                <button type="button" class="btn-close" data-bs-dismiss="modal"></button>
            </div>
            <form action="/add_project" method="POST">
                <div class="modal-body">
                    <div class="mb-3">
                        <label class="form-label">Title</label>
                        <input type="text" name="title" class="form-control" required>
                    </div>
                    <div class="mb-3">
                        <label class="form-label">Description</label>
                        <textarea name="description" class="form-control" rows="2"></textarea>
                    </div>
                    <div class="mb-3">
                        <label class="form-label">Category</label>
                        <select name="category" class="form-select">
                            {% for category in categories %}
                            <option value="{{ category.name }}">{{ category.name }}</option>
                            {% endfor %}
                        </select>
                    </div>
                    <div class="row">
                        <div class="col mb-3">
                            <label class="form-label">Revenue ($)</label>
                            <input type="number" step="0.01" min="0" name="revenue" class="form-control" value="0">
                        </div>
                        <div class="col mb-3">
                            <label class="form-label">Project Date</label>
                            <input type="date" name="project_date" class="form-control">
                        </div>
                    </div>
                    <div class="form-check">
                        <input class="form-check-input" type="checkbox" name="is_published" id="projectPublished">
                        <label class="form-check-label" for="projectPublished">Published</label>
                    </div>
                </div>
                <div class="modal-footer">
                    <button type="button" class="btn btn-secondary" data-bs-dismiss="modal">Close</button>
                    <button type="submit" class="btn btn-primary">Save Project</button>
                </div>
            </form>
        </div>
    </div>
</div>
{% endblock %}
"""

SERVICES_TEMPLATE = """
{% extends "base" %}
{% block content %}
<div class="d-flex justify-content-between align-items-center mb-4">
    <h2 class="fw-bold">Services</h2>
    <button class="btn btn-primary" data-bs-toggle="modal" data-bs-target="#addServiceModal">
        <i class="bi bi-plus-lg"></i> New Service
    </button>
</div>

<div class="row">
    {% for service in services %}
    <div class="col-md-4 mb-3">
        <div class="card p-3 h-100">
            <div class="d-flex justify-content-between">
                <h5><i class="bi {{ service.icon or 'bi-gear' }} me-2"></i>{{ service.title }}</h5>
                <a href="/delete_service/{{ service.id }}" class="text-danger" onclick="return confirm('Delete this service?')"><i class="bi bi-trash"></i></a>
            </div>
            <p class="small text-muted mb-0">{{ service.description }}</p>
        </div>
    </div>
    {% else %}
    <div class="col-12 text-center py-5 text-muted">No services yet.</div>
    {% endfor %}
</div>

<div class="modal fade" id="addServiceModal" tabindex="-1">
    <div class="modal-dialog">
        <div class="modal-content">
            <div class="modal-header">
                <h5 class="modal-title">New Service</h5>
                <button type="button" class="btn-close" data-bs-dismiss="modal"></button>
            </div>
            <form action="/add_service" method="POST">
                <div class="modal-body">
                    <div class="mb-3">
                        <label class="form-label">Title</label>
                        <input type="text" name="title" class="form-control" required>
                    </div>
                    <div class="mb-3">
                        <label class="form-label">Description</label>
                        <textarea name="description" class="form-control" rows="3"></textarea>
                    </div>
                    <div class="mb-3">
                        <label class="form-label">Icon</label>
                        <input type="text" name="icon" class="form-control" placeholder="e.g. bi-robot">
                    </div>
                </div>
                <div class="modal-footer">
                    <button type="button" class="btn btn-secondary" data-bs-dismiss="modal">Close</button>
                    <button type="submit" class="btn btn-primary">Save Service</button>
                </div>
            </form>
        </div>
    </div>
</div>
{% endblock %}
"""

CLIENTS_TEMPLATE = """
{% extends "base" %}
{% block content %}
<div class="d-flex justify-content-between align-items-center mb-4">
    <h2 class="fw-bold">Clients</h2>
    <button class="btn btn-primary" data-bs-toggle="modal" data-bs-target="#addClientModal">
        <i class="bi bi-person-plus-fill"></i> Add Client
    </button>
</div>

<div class="card border-0 shadow-sm">
    <div class="table-responsive">
        <table class="table table-hover align-middle mb-0">
            <thead class="table-light">
                <tr>
                    <th>Client</th>
                    <th>Logo Text</th>
                    <th>Status</th>
                    <th class="text-end">Actions</th>
                </tr>
            </thead>
            <tbody>
                {% for client in clients %}
                <tr>
                    <td class="fw-bold">{{ client.name }}</td>
                    <td class="text-muted">{{ client.logo_text }}</td>
                    <td>
                        {% if client.is_published %}
                            <span class="badge bg-success bg-opacity-10 text-success px-3">Live</span>
                        {% else %}
                            <span class="badge bg-secondary bg-opacity-10 text-secondary px-3">Hidden</span>
                        {% endif %}
                    </td>
                    <td class="text-end">
                        <a href="/toggle_client/{{ client.id }}" class="btn btn-sm btn-outline-dark me-1"><i class="bi bi-eye"></i></a>
                        <a href="/delete_client/{{ client.id }}" class="btn btn-sm btn-outline-danger" onclick="return confirm('Delete this client?')"><i class="bi bi-trash"></i></a>
                    </td>
                </tr>
                {% else %}
                <tr>
                    <td colspan="4" class="text-center py-5 text-muted">
                        <i class="bi bi-people display-4 d-block mb-3"></i>
                        No clients found. Add your first client!
                    </td>
                </tr>
                {% endfor %}
            </tbody>
        </table>
    </div>
</div>

<div class="modal fade" id="addClientModal" tabindex="-1">
    <div class="modal-dialog">
        <div class="modal-content">
            <div class="modal-header">
                <h5 class="modal-title">New Client</h5>
                <button type="button" class="btn-close" data-bs-dismiss="modal"></button>
            </div>
            <form action="/add_client" method="POST">
                <div class="modal-body">
                    <div class="mb-3">
                        <label class="form-label">Name</label>
                        <input type="text" name="name" class="form-control" required>
                    </div>
                    <div class="mb-3">
                        <label class="form-label">Logo Text</label>
                        <input type="text" name="logo_text" class="form-control">
                    </div>
                    <div class="form-check">
                        <input class="form-check-input" type="checkbox" name="is_published" id="clientPublished" checked>
                        <label class="form-check-label" for="clientPublished">Show on website</label>
                    </div>
                </div>
                <div class="modal-footer">
                    <button type="button" class="btn btn-secondary" data-bs-dismiss="modal">Close</button>
                    <button type="submit" class="btn btn-primary">Save Client</button>
                </div>
            </form>
        </div>
    </div>
</div>
{% endblock %}
"""

CATEGORIES_TEMPLATE = """
{% extends "base" %}
{% block content %}
<div class="d-flex justify-content-between align-items-center mb-4">
    <h2 class="fw-bold">Categories</h2>
    <form action="/add_category" method="POST" class="d-flex gap-2">
        <input type="text" name="name" class="form-control form-control-sm" placeholder="New category" required>
        <button type="submit" class="btn btn-primary btn-sm text-nowrap"><i class="bi bi-plus-lg"></i> Add</button>
    </form>
</div>

<div class="card border-0 shadow-sm">
    <div class="table-responsive">
        <table class="table table-hover align-middle mb-0">
            <thead class="table-light">
                <tr>
                    <th>Name</th>
                    <th>Projects</th>
                    <th class="text-end">Actions</th>
                </tr>
            </thead>
            <tbody>
                {% for category in categories %}
                <tr>
                    <td>
                        <form action="/rename_category/{{ category.id }}" method="POST" class="d-flex gap-2">
                            <input type="text" name="name" value="{{ category.name }}" class="form-control form-control-sm" style="max-width: 260px;" required>
                            <button type="submit" class="btn btn-sm btn-outline-dark" title="Rename"><i class="bi bi-pencil"></i></button>
                        </form>
                    </td>
                    <td>
                        {% if project_counts.get(category.name) %}
                        <span class="badge border text-dark bg-light">{{ project_counts[category.name] }} projects</span>
                        {% else %}
                        <span class="small text-muted">Unused</span>
                        {% endif %}
                    </td>
                    <td class="text-end">
                        <a href="/delete_category/{{ category.id }}" class="btn btn-sm btn-outline-danger" onclick="return confirm('Delete this category?')"><i class="bi bi-trash"></i></a>
                    </td>
                </tr>
                {% else %}
                <tr>
                    <td colspan="3" class="text-center py-5 text-muted">
                        <i class="bi bi-tags display-4 d-block mb-3"></i>
                        Create your first category to organize projects.
                    </td>
                </tr>
                {% endfor %}
            </tbody>
        </table>
    </div>
</div>
{% endblock %}
"""

LEADS_TEMPLATE = """
{% extends "base" %}
{% block content %}
<div class="d-flex justify-content-between align-items-center mb-4">
    <h2 class="fw-bold">Leads</h2>
    <button class="btn btn-primary" data-bs-toggle="modal" data-bs-target="#addLeadModal">
        <i class="bi bi-person-plus"></i> New Lead
    </button>
</div>

<form action="/leads" method="GET" class="d-flex gap-2 mb-3">
    <input type="text" name="q" value="{{ query }}" class="form-control form-control-sm" style="max-width: 260px;" placeholder="Search name, email, company">
    <select name="status" class="form-select form-select-sm" style="width: auto;" onchange="this.form.submit()">
        <option value="">All statuses</option>
        {% for value, label in lead_statuses %}
        <option value="{{ value }}" {% if value == selected_status %}selected{% endif %}>{{ label }}</option>
        {% endfor %}
    </select>
    <button type="submit" class="btn btn-sm btn-outline-dark"><i class="bi bi-search"></i></button>
</form>

<div class="card border-0 shadow-sm">
    <div class="table-responsive">
        <table class="table table-hover align-middle mb-0">
            <thead class="table-light">
                <tr>
                    <th>Lead</th>
                    <th>Contact</th>
                    <th>Source</th>
                    <th>Value</th>
                    <th>Status</th>
                    <th class="text-end">Actions</th>
                </tr>
            </thead>
            <tbody>
                {% for lead in leads %}
                <tr>
                    <td>
                        <div class="fw-bold">{{ lead.name }}</div>
                        <div class="small text-muted">{{ lead.company or '' }}</div>
                    </td>
                    <td>
                        {% if lead.email %}<a href="mailto:{{ lead.email }}" class="text-decoration-none">{{ lead.email }}</a>{% endif %}
                        <div class="small text-muted">{{ lead.phone or '' }}</div>
                    </td>
                    <td>{{ lead.source or '' }}</td>
                    <td>{{ format_currency(lead.value) }}</td>
                    <td>
                        <form action="/update_lead/{{ lead.id }}" method="POST">
                            <select name="status" class="form-select form-select-sm lead-{{ lead.status }}" onchange="this.form.submit()">
                                {% for value, label in lead_statuses %}
                                <option value="{{ value }}" {% if value == lead.status %}selected{% endif %}>{{ label }}</option>
                                {% endfor %}
                            </select>
                        </form>
                    </td>
                    <td class="text-end">
                        <a href="/delete_lead/{{ lead.id }}" class="btn btn-sm btn-outline-danger" onclick="return confirm('Delete this lead?')"><i class="bi bi-trash"></i></a>
                    </td>
                </tr>
                {% else %}
                <tr>
                    <td colspan="6" class="text-center py-5 text-muted">No leads match.</td>
                </tr>
                {% endfor %}
            </tbody>
        </table>
    </div>
</div>

<div class="modal fade" id="addLeadModal" tabindex="-1">
    <div class="modal-dialog">
        <div class="modal-content">
            <div class="modal-header">
                <h5 class="modal-title">New Lead</h5>
                <button type="button" class="btn-close" data-bs-dismiss="modal"></button>
            </div>
            <form action="/add_lead" method="POST">
                <div class="modal-body">
                    <div class="mb-3">
                        <label class="form-label">Name</label>
                        <input type="text" name="name" class="form-control" required>
                    </div>
                    <div class="row">
                        <div class="col mb-3">
                            <label class="form-label">Email</label>
                            <input type="email" name="email" class="form-control">
                        </div>
                        <div class="col mb-3">
                            <label class="form-label">Phone</label>
                            <input type="text" name="phone" class="form-control">
                        </div>
                    </div>
                    <div class="mb-3">
                        <label class="form-label">Company</label>
                        <input type="text" name="company" class="form-control">
                    </div>
                    <div class="row">
                        <div class="col mb-3">
                            <label class="form-label">Value ($)</label>
                            <input type="number" step="0.01" min="0" name="value" class="form-control" value="0">
                        </div>
                        <div class="col mb-3">
                            <label class="form-label">Source</label>
                            <select name="source" class="form-select">
                                {% for source in lead_sources %}
                                <option value="{{ source }}">{{ source }}</option>
                                {% endfor %}
                            </select>
                        </div>
                    </div>
                    <div class="mb-3">
                        <label class="form-label">Notes</label>
                        <textarea name="notes" class="form-control" rows="2"></textarea>
                    </div>
                </div>
                <div class="modal-footer">
                    <button type="button" class="btn btn-secondary" data-bs-dismiss="modal">Close</button>
                    <button type="submit" class="btn btn-primary">Save Lead</button>
                </div>
            </form>
        </div>
    </div>
</div>
{% endblock %}
"""

ERROR_TEMPLATE = """
{% extends "base" %}
{% block content %}
<div class="text-center py-5">
    <h1 class="display-4 fw-bold">{{ code }}</h1>
    <p class="lead text-muted">{{ message }}</p>
    <a href="/dashboard" class="btn btn-outline-dark">Back to dashboard</a>
</div>
{% endblock %}
"""


def template_loader():
    """In-memory loader registering every page template by short name."""
    return jinja2.DictLoader({
        'base': BASE_TEMPLATE,
        'home': HOME_TEMPLATE,
        'dashboard': DASHBOARD_TEMPLATE,
        'projects': PROJECTS_TEMPLATE,
        'services': SERVICES_TEMPLATE,
        'clients': CLIENTS_TEMPLATE,
        'categories': CATEGORIES_TEMPLATE,
        'leads': LEADS_TEMPLATE,
        'error': ERROR_TEMPLATE,
    })
