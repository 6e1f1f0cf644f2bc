import unittest

from tests.db_helpers import issue_payload, load_event_fixture


class ParseIssuePayloadTests(unittest.TestCase):
    def test_parses_issue_and_repository(self):
        from tasksync.services.github_issue import parse_issue_payload

        issue = parse_issue_payload(load_event_fixture("issues_opened"))

        self.assertEqual(issue.github_id, 73464126)
        self.assertEqual(issue.number, 2)
        self.assertEqual(issue.title, "Spelling error in the README file")
        self.assertEqual(issue.body, "It looks like you accidently spelled 'commit' with two 't's.")
        self.assertEqual(issue.state, "open")
        self.assertEqual(issue.repository_github_id, 35129377)

    def test_null_body_becomes_empty_markdown(self):
        from tasksync.services.github_issue import parse_issue_payload

        issue = parse_issue_payload(issue_payload(body=None))
        self.assertEqual(issue.body, "")

    def test_missing_issue_id_is_malformed(self):
        from tasksync.errors import MalformedPayloadError
        from tasksync.services.github_issue import parse_issue_payload

        payload = issue_payload()
        del payload["issue"]["id"]

        with self.assertRaises(MalformedPayloadError) as ctx:
            parse_issue_payload(payload)
        self.assertEqual(ctx.exception.missing, ["issue.id"])

    def test_reports_every_missing_field(self):
        from tasksync.errors import MalformedPayloadError
        from tasksync.services.github_issue import parse_issue_payload

        with self.assertRaises(MalformedPayloadError) as ctx:
            parse_issue_payload({"issue": {"body": "x"}, "repository": {}})
        self.assertEqual(
            ctx.exception.missing,
            ["issue.id", "issue.state", "issue.title", "repository.id"],
        )

    def test_empty_issue_object_is_malformed(self):
        from tasksync.errors import MalformedPayloadError
        from tasksync.services.github_issue import parse_issue_payload

        payload = issue_payload()
        payload["issue"] = {}

        with self.assertRaises(MalformedPayloadError) as ctx:
            parse_issue_payload(payload)
        self.assertIn("issue.id", ctx.exception.missing)
        self.assertIn("issue.body", ctx.exception.missing)

    def test_non_integral_issue_id_is_malformed(self):
        from tasksync.errors import MalformedPayloadError
        from tasksync.services.github_issue import parse_issue_payload

        with self.assertRaises(MalformedPayloadError) as ctx:
            parse_issue_payload(issue_payload(id=123.9))
        self.assertEqual(ctx.exception.missing, ["issue.id"])

    def test_string_and_bool_ids_are_not_coerced(self):
        from tasksync.errors import MalformedPayloadError
        from tasksync.services.github_issue import parse_issue_payload

        for bad_id in ("123", True):
            with self.subTest(bad_id=bad_id):
                with self.assertRaises(MalformedPayloadError):
                    parse_issue_payload(issue_payload(id=bad_id))

        payload = issue_payload()
        payload["repository"]["id"] = "35129377"
        with self.assertRaises(MalformedPayloadError) as ctx:
            parse_issue_payload(payload)
        self.assertEqual(ctx.exception.missing, ["repository.id"])

    def test_unknown_state_is_malformed(self):
        from tasksync.errors import MalformedPayloadError
        from tasksync.services.github_issue import parse_issue_payload

        with self.assertRaises(MalformedPayloadError):
            parse_issue_payload(issue_payload(state="merged"))

    def test_non_dict_payload_is_malformed(self):
        from tasksync.errors import MalformedPayloadError
        from tasksync.services.github_issue import parse_issue_payload

        with self.assertRaises(MalformedPayloadError):
            parse_issue_payload(None)

    def test_issue_is_immutable(self):
        from dataclasses import FrozenInstanceError

        from tasksync.services.github_issue import parse_issue_payload

        issue = parse_issue_payload(issue_payload())
        with self.assertRaises(FrozenInstanceError):
            issue.title = "changed"


if __name__ == "__main__":
    unittest.main()
