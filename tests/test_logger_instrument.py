import io
import json
import unittest

from eithervalidation import ConsoleLogger, instrument, lift, Left, Right, LIST


def valid_postcode(s):
    if len(s) == 4 and s.isdigit():
        return Right(s)
    return Left(["Postcode must be 4 digits"])


class TestConsoleLogger(unittest.TestCase):
    def test_level_filtering(self):
        buf = io.StringIO()
        log = ConsoleLogger("t", level="WARN", stream=buf)
        log.info("hidden")
        log.warn("shown")
        out = buf.getvalue()
        self.assertNotIn("hidden", out)
        self.assertIn("t WARN: shown", out)

    def test_set_level_and_bind(self):
        buf = io.StringIO()
        log = ConsoleLogger("t", stream=buf)
        log.set_level("debug")
        self.assertEqual(log.level_name, "DEBUG")
        child = log.bind(field="age")
        child.debug("check")
        self.assertIn("field='age'", buf.getvalue())
        self.assertEqual(log.context, {})

    def test_json_output(self):
        buf = io.StringIO()
        ConsoleLogger("t", json_output=True, stream=buf).error("boom", errors=["a", "b"])
        data = json.loads(buf.getvalue())
        self.assertEqual(data["level"], "ERROR")
        self.assertEqual(data["msg"], "boom")
        self.assertEqual(data["fields"], {"errors": ["a", "b"]})


class TestInstrument(unittest.TestCase):
    def test_logs_outcomes_without_changing_results(self):
        buf = io.StringIO()
        log = ConsoleLogger("validation", level="INFO", json_output=True, stream=buf)
        postcode = instrument("postcode", valid_postcode, log, tags={"form": "signup"})

        self.assertEqual(postcode("1234"), Right("1234"))
        self.assertEqual(postcode("a1"), Left(["Postcode must be 4 digits"]))

        lines = [json.loads(l) for l in buf.getvalue().splitlines()]
        self.assertEqual([(l["level"], l["msg"]) for l in lines], [("INFO", "valid postcode"), ("WARN", "invalid postcode")])
        self.assertEqual(lines[1]["fields"]["error"], ["Postcode must be 4 digits"])
        self.assertEqual(lines[0]["fields"]["form"], "signup")

    def test_debug_line_per_call(self):
        buf = io.StringIO()
        postcode = instrument("postcode", valid_postcode, ConsoleLogger(level="DEBUG", stream=buf))
        postcode("1234")
        self.assertIn("DEBUG: check postcode", buf.getvalue())
        self.assertEqual(postcode.__name__, "valid_postcode")

    def test_feeds_the_combinators(self):
        buf = io.StringIO()
        postcode = instrument("postcode", valid_postcode, ConsoleLogger(stream=buf))
        r = lift(lambda a, b: (a, b))(postcode("x"), postcode("y"), merge=LIST)
        self.assertEqual(r, Left(["Postcode must be 4 digits", "Postcode must be 4 digits"]))
