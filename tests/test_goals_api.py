# -*- coding: utf-8 -*-

from __future__ import annotations

import shutil
import tempfile
import unittest
from pathlib import Path

from fastapi.testclient import TestClient

from portions.api import app
from portions.db import EventStore, reset_store


class TestGoalsApi(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = Path(tempfile.mkdtemp(prefix="portions-test-"))
        self.store = EventStore.open(self._tmp / "nutrients.db")
        reset_store(self.store)
        self.client = TestClient(app)

    def tearDown(self) -> None:
        self.client.close()
        reset_store(None)
        self.store.close()
        shutil.rmtree(self._tmp, ignore_errors=True)

    def _goals(self) -> dict:
        resp = self.client.get("/goals")
        self.assertEqual(resp.status_code, 200)
        return resp.json()

    def test_get_goals_empty(self) -> None:
        self.assertEqual(self._goals(), {})

    def test_inc_goal_validation(self) -> None:
        for name in ("protein", "carbs", "fats", "vegetables"):
            resp = self.client.post(f"/goals/portions/{name}/inc")
            self.assertEqual(resp.status_code, 200)
            self.assertEqual(resp.json(), "success")
        resp = self.client.post("/goals/portions/bad/inc")
        self.assertEqual(resp.status_code, 400)

    def test_inc_goal(self) -> None:
        self.client.post("/goals/portions/protein/inc")
        self.client.post("/goals/portions/protein/inc")
        self.client.post("/goals/portions/carbs/inc")
        self.assertEqual(self._goals(), {"carbs": 1, "protein": 2})

    def test_dec_goal(self) -> None:
        self.client.post("/goals/portions/protein/inc")
        self.client.post("/goals/portions/protein/inc")
        resp = self.client.post("/goals/portions/protein/dec")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self._goals(), {"protein": 1})

    def test_dec_goal_validation_empty(self) -> None:
        resp = self.client.post("/goals/portions/protein/dec")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(self._goals(), {})

    def test_dec_goal_validation_0(self) -> None:
        self.assertEqual(self.client.post("/goals/portions/protein/inc").status_code, 200)
        self.assertEqual(self.client.post("/goals/portions/protein/dec").status_code, 200)
        self.assertEqual(self.client.post("/goals/portions/protein/dec").status_code, 400)
        self.assertEqual(self._goals(), {"protein": 0})

    def test_dec_goal_invalid_nutrient(self) -> None:
        resp = self.client.post("/goals/portions/Protein/dec")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["detail"], "Something went wrong: invalid request: invalid nutrient")

    def test_goals_independent_of_days(self) -> None:
        self.client.post("/days/2026-01-01/portions/protein/consume")
        self.assertEqual(self._goals(), {})


if __name__ == "__main__":
    unittest.main()
