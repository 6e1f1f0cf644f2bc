import unittest

from tests.db_helpers import insert_github_repo, insert_task, insert_user, make_session


class RepositoryLinkResolverTests(unittest.TestCase):
    def setUp(self):
        self.db = make_session()

    def tearDown(self):
        self.db.close()

    def test_resolves_links_in_creation_order(self):
        from tasksync.services.repo_links import RepositoryLinkResolver

        repo = insert_github_repo(self.db, github_id=10, projects=3)
        insert_github_repo(self.db, github_id=20, name="other/repo", projects=1)

        links = RepositoryLinkResolver(self.db).resolve(10)

        self.assertEqual([l.id for l in links], [l.id for l in repo.project_github_repos])
        self.assertEqual(len(links), 3)
        self.assertTrue(all(l.github_repo_id == repo.id for l in links))

    def test_repository_without_links(self):
        from tasksync.services.repo_links import RepositoryLinkResolver

        insert_github_repo(self.db, github_id=10, projects=0)
        self.assertEqual(RepositoryLinkResolver(self.db).resolve(10), [])

    def test_unknown_repository(self):
        from tasksync.services.repo_links import RepositoryLinkResolver

        self.assertEqual(RepositoryLinkResolver(self.db).resolve(404), [])


class TaskMatcherTests(unittest.TestCase):
    def setUp(self):
        self.db = make_session()
        self.user = insert_user(self.db)
        repo = insert_github_repo(self.db, projects=2)
        self.project_a, self.project_b = [l.project_id for l in repo.project_github_repos]

    def tearDown(self):
        self.db.close()

    def test_finds_task_in_project(self):
        from tasksync.services.task_matcher import TaskMatcher

        task = insert_task(self.db, self.project_a, self.user.id, github_id=123)

        found = TaskMatcher(self.db).find(self.project_a, 123)
        self.assertIsNotNone(found)
        self.assertEqual(found.id, task.id)

    def test_does_not_match_other_project(self):
        from tasksync.services.task_matcher import TaskMatcher

        insert_task(self.db, self.project_a, self.user.id, github_id=123)
        self.assertIsNone(TaskMatcher(self.db).find(self.project_b, 123))

    def test_does_not_adopt_tasks_without_github_id(self):
        from tasksync.services.task_matcher import TaskMatcher

        insert_task(self.db, self.project_a, self.user.id, github_id=None)
        self.assertIsNone(TaskMatcher(self.db).find(self.project_a, None))


if __name__ == "__main__":
    unittest.main()
