import os
import unittest
from datetime import date

os.environ['DATABASE_URL'] = 'sqlite://'

from app import app, db, init_db, Category, Client, Lead, Project  # noqa: E402


class AppTestCase(unittest.TestCase):
    def setUp(self):
        app.testing = True
        self.client = app.test_client()
        with app.app_context():
            db.drop_all()
            db.create_all()

    def tearDown(self):
        with app.app_context():
            db.session.remove()
            db.drop_all()

    def add_project(self, **overrides):
        form = {
            'title': 'Invoice bot',
            'category': 'Automation',
            'revenue': '100',
            'project_date': '2024-03-05',
        }
        form.update(overrides)
        return self.client.post('/add_project', data=form)

    def add_lead(self, **overrides):
        form = {'name': 'Ada Byron', 'email': 'ada@example.com', 'company': 'Engines Ltd', 'value': '500'}
        form.update(overrides)
        return self.client.post('/add_lead', data=form)


class TestRevenueApi(AppTestCase):
    def test_year_series_from_projects(self):
        self.add_project(revenue='100', project_date='2024-03-05')
        self.add_project(revenue='50', project_date='2024-03-20')
        self.add_project(revenue='25', project_date='2024-07-01', category='AI Agents')

        rv = self.client.get('/api/revenue?period=year&year=2024')
        self.assertEqual(rv.status_code, 200)
        body = rv.get_json()
        self.assertEqual(body['period'], 'year')
        self.assertEqual(body['year'], 2024)
        self.assertEqual(body['label'], 'Year 2024')
        self.assertEqual(len(body['series']), 12)
        self.assertEqual(body['series'][2]['revenue'], 150)
        self.assertEqual(body['series'][6]['revenue'], 25)
        self.assertEqual(body['series'][-1]['cumulative'], 175)
        self.assertEqual(body['total'], 175)

    def test_month_series_has_thirty_points(self):
        self.add_project(revenue='40', project_date=date.today().isoformat())
        body = self.client.get('/api/revenue?period=month').get_json()
        self.assertEqual(len(body['series']), 30)
        self.assertEqual(body['series'][-1]['date'], date.today().isoformat())
        self.assertEqual(body['total'], 40)
        self.assertIsNone(body['year'])

    def test_lifetime_without_projects(self):
        body = self.client.get('/api/revenue?period=lifetime').get_json()
        self.assertEqual(len(body['series']), 1)
        self.assertEqual(body['series'][0]['label'], str(date.today().year))
        self.assertEqual(body['total'], 0)

    def test_unknown_period_and_year_fall_back(self):
        body = self.client.get('/api/revenue?period=fortnight&year=abc').get_json()
        self.assertEqual(body['period'], 'year')
        self.assertEqual(body['year'], date.today().year)
        self.assertEqual(len(body['series']), 12)


class TestDashboard(AppTestCase):
    def test_renders_empty(self):
        rv = self.client.get('/dashboard')
        self.assertEqual(rv.status_code, 200)
        self.assertIn(b'Revenue', rv.data)
        self.assertIn(b'No categorised revenue yet', rv.data)

    def test_renders_with_data(self):
        self.add_project(revenue='12400', project_date='2024-03-05', is_published='on')
        self.add_lead(status='won')
        rv = self.client.get('/dashboard?period=year&year=2024')
        self.assertEqual(rv.status_code, 200)
        self.assertIn(b'Year 2024', rv.data)
        self.assertIn(b'$12K', rv.data)
        self.assertIn(b'Ada Byron', rv.data)
        self.assertIn(b'1 live', rv.data)

    def test_home(self):
        self.assertEqual(self.client.get('/').status_code, 200)


class TestProjects(AppTestCase):
    def test_add_toggle_delete(self):
        rv = self.add_project()
        self.assertEqual(rv.status_code, 302)
        with app.app_context():
            project = Project.query.one()
            self.assertEqual(project.revenue, 100)
            self.assertFalse(project.is_published)
            project_id = project.id

        self.client.get(f'/toggle_project/{project_id}')
        with app.app_context():
            self.assertTrue(db.session.get(Project, project_id).is_published)

        self.assertIn(b'Invoice bot', self.client.get('/projects').data)

        self.client.get(f'/delete_project/{project_id}')
        with app.app_context():
            self.assertEqual(Project.query.count(), 0)

    def test_missing_date_defaults_to_today(self):
        self.add_project(project_date='')
        with app.app_context():
            self.assertEqual(Project.query.one().project_date, date.today().isoformat())

    def test_validation(self):
        self.assertEqual(self.add_project(title='').status_code, 400)
        self.assertEqual(self.add_project(revenue='lots').status_code, 400)
        self.assertEqual(self.add_project(revenue='-5').status_code, 400)
        rv = self.add_project(project_date='05/03/2024')
        self.assertEqual(rv.status_code, 400)
        self.assertIn(b'YYYY-MM-DD', rv.data)
        with app.app_context():
            self.assertEqual(Project.query.count(), 0)

    def test_missing_project_is_404(self):
        self.assertEqual(self.client.get('/delete_project/999').status_code, 404)


class TestServicesAndClients(AppTestCase):
    def test_service_lifecycle(self):
        self.client.post('/add_service', data={'title': 'AI Chatbots', 'description': 'Support bots'})
        rv = self.client.get('/services')
        self.assertIn(b'AI Chatbots', rv.data)
        self.client.get('/delete_service/1')
        self.assertNotIn(b'AI Chatbots', self.client.get('/services').data)

    def test_client_logo_text_defaults_to_name(self):
        self.client.post('/add_client', data={'name': 'Acme', 'is_published': 'on'})
        with app.app_context():
            client = Client.query.one()
            self.assertEqual(client.logo_text, 'Acme')
            self.assertTrue(client.is_published)
            client_id = client.id
        self.client.get(f'/toggle_client/{client_id}')
        with app.app_context():
            self.assertFalse(db.session.get(Client, client_id).is_published)


class TestLeads(AppTestCase):
    def test_add_defaults_to_new(self):
        self.add_lead()
        with app.app_context():
            lead = Lead.query.one()
            self.assertEqual(lead.status, 'new')
            self.assertEqual(lead.value, 500)

    def test_filter_and_search(self):
        self.add_lead(name='Won Lead', company='Alpha', status='won')
        self.add_lead(name='Fresh Lead', company='Beta', email='')

        rv = self.client.get('/leads?status=won')
        self.assertIn(b'Won Lead', rv.data)
        self.assertNotIn(b'Fresh Lead', rv.data)

        rv = self.client.get('/leads?q=beta')
        self.assertIn(b'Fresh Lead', rv.data)
        self.assertNotIn(b'Won Lead', rv.data)

    def test_update_status(self):
        self.add_lead()
        self.client.post('/update_lead/1', data={'status': 'qualified'})
        with app.app_context():
            lead = db.session.get(Lead, 1)
            self.assertEqual(lead.status, 'qualified')
            self.assertEqual(lead.value, 500)

    def test_validation(self):
        self.assertEqual(self.add_lead(name='  ').status_code, 400)
        self.assertEqual(self.add_lead(status='maybe').status_code, 400)
        self.assertEqual(self.add_lead(value='-1').status_code, 400)
        self.assertEqual(self.add_lead(name='x' * 256).status_code, 400)
        with app.app_context():
            self.assertEqual(Lead.query.count(), 0)

    def test_delete(self):
        self.add_lead()
        self.client.get('/delete_lead/1')
        with app.app_context():
            self.assertEqual(Lead.query.count(), 0)
        self.assertEqual(self.client.get('/delete_lead/1').status_code, 404)


class TestEscaping(AppTestCase):
    payload = '</script><script>alert(1)</script>'

    def test_dashboard_escapes_category_and_lead_names(self):
        self.add_project(category=self.payload, project_date='2024-03-05')
        self.add_lead(name=self.payload, status='won')
        rv = self.client.get('/dashboard?period=year&year=2024')
        self.assertEqual(rv.status_code, 200)
        self.assertNotIn(b'<script>alert(1)</script>', rv.data)
        self.assertNotIn(b'</script><script>', rv.data)
        self.assertIn(b'&lt;/script&gt;', rv.data)

    def test_list_pages_escape_user_input(self):
        self.add_lead(name=self.payload, company=self.payload)
        self.client.post('/add_client', data={'name': self.payload})
        for path in ('/leads', '/clients'):
            rv = self.client.get(path)
            self.assertNotIn(b'<script>alert(1)</script>', rv.data, path)


class TestCategories(AppTestCase):
    def test_add_lists_project_counts(self):
        self.client.post('/add_category', data={'name': 'Automation'})
        self.client.post('/add_category', data={'name': 'Chatbots'})
        self.add_project(category='Automation')
        self.add_project(category='Automation', title='CRM sync')

        rv = self.client.get('/categories')
        self.assertEqual(rv.status_code, 200)
        self.assertIn(b'Chatbots', rv.data)
        self.assertIn(b'2 projects', rv.data)
        self.assertIn(b'Unused', rv.data)

        self.assertIn(b'Chatbots', self.client.get('/projects').data)

    def test_duplicate_name_is_rejected(self):
        self.client.post('/add_category', data={'name': 'Automation'})
        self.assertEqual(self.client.post('/add_category', data={'name': 'automation'}).status_code, 409)
        self.assertEqual(self.client.post('/add_category', data={'name': ''}).status_code, 400)
        with app.app_context():
            self.assertEqual(Category.query.count(), 1)

    def test_rename_updates_projects(self):
        self.client.post('/add_category', data={'name': 'Web'})
        self.add_project(category='Web')
        self.client.post('/rename_category/1', data={'name': 'Web Development'})
        with app.app_context():
            self.assertEqual(db.session.get(Category, 1).name, 'Web Development')
            self.assertEqual(Project.query.one().category, 'Web Development')

    def test_delete(self):
        self.client.post('/add_category', data={'name': 'Automation'})
        self.client.get('/delete_category/1')
        with app.app_context():
            self.assertEqual(Category.query.count(), 0)
        self.assertEqual(self.client.get('/delete_category/1').status_code, 404)


class TestHealthAndInit(AppTestCase):
    def test_health(self):
        rv = self.client.get('/api/health')
        self.assertEqual(rv.status_code, 200)
        body = rv.get_json()
        self.assertEqual(body['status'], 'healthy')
        self.assertEqual(body['checks']['database']['status'], 'up')
        self.assertIn('latency', body['checks']['database'])

    def test_api_404_is_json(self):
        rv = self.client.get('/api/nothing-here')
        self.assertEqual(rv.status_code, 404)
        self.assertIn('error', rv.get_json())

    def test_init_db_seeds_categories_once(self):
        init_db()
        init_db()
        with app.app_context():
            self.assertEqual(Category.query.count(), 4)


if __name__ == '__main__':
    unittest.main()
