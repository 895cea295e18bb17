"""End-to-end tests over the HTTP API with in-memory storage and a scripted oracle."""

import inspect
from datetime import datetime, timedelta, timezone

from app.features.enrichment import EnrichmentResult, GeneratedInsight
from fakes import ALICE_ID, BOB_ID


def _create(client, headers, content="I had a great day at work", **fields):
    response = client.post("/api/journal/entries", json={"content": content, **fields}, headers=headers)
    assert response.status_code == 200, response.text
    return response.json()


class TestAuth:
    def test_health_needs_no_token(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_missing_token_is_401(self, client):
        response = client.get("/api/journal/entries")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHORIZED"

    def test_rejected_token_is_401(self, client):
        response = client.get("/api/journal/entries", headers={"Authorization": "Bearer forged"})
        assert response.status_code == 401

    def test_user_profile_is_upserted_from_claims(self, client, alice, supabase):
        response = client.get("/api/auth/user", headers=alice)

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == ALICE_ID
        assert body["firstName"] == "Alice"
        assert body["lastName"] == "Liddell"
        assert body["profileImageUrl"] == "https://img/alice.png"
        assert len(supabase.rows("users")) == 1

        client.get("/api/auth/user", headers=alice)
        assert len(supabase.rows("users")) == 1


class TestEntries:
    def test_create_enriches_and_counts_words(self, client, alice, oracle):
        body = _create(client, alice, mood="happy", title="Good day")

        assert body["userId"] == ALICE_ID
        assert body["wordCount"] == 7
        assert body["sentimentScore"] == 4
        assert body["sentimentConfidence"] == 0.9
        assert body["themes"] == ["work", "gratitude"]
        assert body["isArchived"] is False
        assert oracle.called("analyze_sentiment") == 1
        assert oracle.called("extract_themes") == 1

        stats = client.get("/api/analytics/stats", headers=alice).json()
        assert stats == {"totalEntries": 1, "currentStreak": 1, "averageMood": 9.0, "weeklyInsights": 0}

    def test_sentiment_failure_still_saves_entry(self, client, alice, oracle, supabase):
        oracle.sentiment = EnrichmentResult.failed("analyze_sentiment", "timeout")
        oracle.themes = EnrichmentResult.failed("extract_themes", "timeout")

        body = _create(client, alice)

        assert body["sentimentScore"] == 3
        assert body["sentimentConfidence"] == 0.5
        assert body["themes"] == []
        assert supabase.rows("journal_entries")[0]["sentiment_score"] == 3

    def test_blank_content_is_rejected(self, client, alice, oracle):
        response = client.post("/api/journal/entries", json={"content": "   "}, headers=alice)

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"]["fields"][0]["field"] == "content"
        assert oracle.calls == []

    def test_unknown_mood_is_rejected(self, client, alice):
        response = client.post("/api/journal/entries", json={"content": "ok", "mood": "ecstatic"}, headers=alice)
        assert response.status_code == 400

    def test_list_and_get_are_scoped_to_owner(self, client, alice, bob):
        entry = _create(client, alice)

        assert [e["id"] for e in client.get("/api/journal/entries", headers=alice).json()] == [entry["id"]]
        assert client.get("/api/journal/entries", headers=bob).json() == []

        foreign = client.get(f"/api/journal/entries/{entry['id']}", headers=bob)
        unknown = client.get("/api/journal/entries/does-not-exist", headers=bob)
        assert foreign.status_code == unknown.status_code == 404
        assert foreign.json()["error"]["message"] == unknown.json()["error"]["message"] == "Entry not found"
        assert entry["id"] not in foreign.text

    def test_large_limit_is_accepted(self, client, alice):
        entry = _create(client, alice)

        response = client.get("/api/journal/entries", params={"limit": 1000}, headers=alice)

        assert response.status_code == 200
        assert [e["id"] for e in response.json()] == [entry["id"]]

    def test_update_recomputes_enrichment_on_content_change(self, client, alice, oracle):
        entry = _create(client, alice, title="Before")
        oracle.themes = EnrichmentResult.success(["rest"])

        response = client.put(
            f"/api/journal/entries/{entry['id']}",
            json={"content": "Slept in and read a book"},
            headers=alice,
        )

        body = response.json()
        assert response.status_code == 200
        assert body["wordCount"] == 6
        assert body["themes"] == ["rest"]
        assert body["title"] == "Before"

    def test_update_without_content_skips_oracle(self, client, alice, oracle):
        entry = _create(client, alice)
        oracle.calls.clear()

        body = client.put(f"/api/journal/entries/{entry['id']}", json={"mood": "content"}, headers=alice).json()

        assert body["mood"] == "content"
        assert body["wordCount"] == 7
        assert oracle.calls == []

    def test_update_foreign_entry_is_404_without_oracle_call(self, client, alice, bob, oracle):
        entry = _create(client, alice)
        oracle.calls.clear()

        response = client.put(f"/api/journal/entries/{entry['id']}", json={"content": "mine now"}, headers=bob)

        assert response.status_code == 404
        assert oracle.calls == []

    def test_delete_archives(self, client, alice, supabase):
        entry = _create(client, alice)

        response = client.delete(f"/api/journal/entries/{entry['id']}", headers=alice)

        assert response.status_code == 200
        assert response.json() == {"message": "Entry archived successfully"}
        assert client.get("/api/journal/entries", headers=alice).json() == []
        assert client.get("/api/journal/search", params={"q": "great"}, headers=alice).json() == []
        assert client.get("/api/analytics/stats", headers=alice).json()["totalEntries"] == 0
        assert supabase.rows("journal_entries")[0]["is_archived"] is True

    def test_delete_foreign_entry_is_404(self, client, alice, bob):
        entry = _create(client, alice)
        assert client.delete(f"/api/journal/entries/{entry['id']}", headers=bob).status_code == 404


class TestSearch:
    def test_substring_and_theme_filter(self, client, alice, oracle):
        _create(client, alice, content="I had a great day at work")
        oracle.themes = EnrichmentResult.success(["family"])
        _create(client, alice, content="Great dinner with my family")

        assert len(client.get("/api/journal/search", params={"q": "GREAT"}, headers=alice).json()) == 2
        only_family = client.get("/api/journal/search", params={"q": "great", "themes": "family, health"}, headers=alice)
        assert [e["content"] for e in only_family.json()] == ["Great dinner with my family"]

    def test_absent_substring_returns_empty(self, client, alice):
        _create(client, alice)
        response = client.get("/api/journal/search", params={"q": "zebra"}, headers=alice)

        assert response.status_code == 200
        assert response.json() == []

    def test_missing_query_is_400(self, client, alice):
        response = client.get("/api/journal/search", headers=alice)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Query parameter is required"


class TestPrompts:
    def test_current_creates_lazily_then_reuses(self, client, alice, oracle):
        first = client.get("/api/ai/prompts/current", headers=alice).json()
        second = client.get("/api/ai/prompts/current", headers=alice).json()

        assert first["prompt"] == "What made work feel good today?"
        assert first["used"] is False
        assert first["id"] == second["id"]
        assert oracle.called("generate_empathic_prompt") == 1

    def test_generate_passes_context_and_recent_entries(self, client, alice, oracle):
        for _ in range(7):
            _create(client, alice)

        response = client.post("/api/ai/prompts/generate", json={"context": "exam week"}, headers=alice)

        assert response.status_code == 200
        assert ("generate_empathic_prompt", 5, "exam week") in oracle.calls

    def test_generate_falls_back_when_oracle_fails(self, client, alice, oracle):
        oracle.prompt = EnrichmentResult.failed("generate_empathic_prompt", "down")

        body = client.post("/api/ai/prompts/generate", params={"context": "tired"}, headers=alice).json()

        assert body["prompt"] == "How did you show kindness to yourself or others today?"
        assert body["context"] == "Default empathetic prompt"

    def test_use_marks_prompt_and_next_current_is_new(self, client, alice, bob):
        prompt = client.get("/api/ai/prompts/current", headers=alice).json()

        assert client.post(f"/api/ai/prompts/{prompt['id']}/use", headers=bob).status_code == 404
        response = client.post(f"/api/ai/prompts/{prompt['id']}/use", headers=alice)
        assert response.json() == {"message": "Prompt marked as used"}

        assert client.get("/api/ai/prompts/current", headers=alice).json()["id"] != prompt["id"]


class TestInsights:
    def test_fewer_than_three_entries_yields_nothing(self, client, alice, oracle):
        _create(client, alice)

        response = client.post("/api/insights/generate", headers=alice)

        assert response.status_code == 200
        assert response.json() == []

    def test_generate_persists_period_and_view(self, client, alice, bob, oracle, supabase):
        now = datetime.now(timezone.utc)
        for days_ago in (3, 2, 1):
            supabase.seed("journal_entries", {
                "user_id": ALICE_ID, "content": f"entry {days_ago}", "mood": "content",
                "created_at": (now - timedelta(days=days_ago)).isoformat(),
            })
        oracle.insights = EnrichmentResult.success([
            GeneratedInsight(type="trend", title="Steady", description="Your mood is steady", confidence=0.7),
        ])

        created = client.post("/api/insights/generate", headers=alice).json()

        assert len(created) == 1
        insight = created[0]
        assert insight["title"] == "Steady"
        assert insight["viewed"] is False
        assert datetime.fromisoformat(insight["periodStart"].replace("Z", "+00:00")) < datetime.fromisoformat(
            insight["periodEnd"].replace("Z", "+00:00")
        )
        assert client.get("/api/insights", headers=alice).json()[0]["id"] == insight["id"]
        assert client.get("/api/analytics/stats", headers=alice).json()["weeklyInsights"] == 1

        assert client.post(f"/api/insights/{insight['id']}/view", headers=bob).status_code == 404
        assert client.post(f"/api/insights/{insight['id']}/view", headers=alice).json() == {
            "message": "Insight marked as viewed"
        }
        assert supabase.rows("insights")[0]["viewed"] is True


class TestAnalytics:
    def test_streak_and_trends(self, client, alice, supabase):
        now = datetime.now(timezone.utc)
        for days_ago, mood in ((0, "happy"), (1, "sad"), (2, None), (4, "stressed")):
            supabase.seed("journal_entries", {
                "user_id": ALICE_ID, "content": "x", "mood": mood, "themes": ["work"],
                "created_at": (now - timedelta(days=days_ago)).isoformat(),
            })
        supabase.seed("journal_entries", {"user_id": BOB_ID, "content": "y", "mood": "happy"})

        stats = client.get("/api/analytics/stats", headers=alice).json()
        assert stats["totalEntries"] == 4
        assert stats["currentStreak"] == 3
        assert stats["averageMood"] == 4.7

        trends = client.get("/api/analytics/mood-trends", params={"days": 3}, headers=alice).json()
        assert [point["mood"] for point in trends] == [3, 9]

        themes = client.get("/api/analytics/themes", params={"days": 30}, headers=alice).json()
        assert themes == [{"theme": "work", "count": 4, "percentage": 100}]

    def test_no_moods_is_neutral_average(self, client, alice):
        _create(client, alice)
        assert client.get("/api/analytics/stats", headers=alice).json()["averageMood"] == 5.0

    def test_invalid_days_is_400(self, client, alice):
        assert client.get("/api/analytics/themes", params={"days": 0}, headers=alice).status_code == 400

    def test_windows_longer_than_a_year_are_allowed(self, client, alice, supabase):
        old = (datetime.now(timezone.utc) - timedelta(days=390)).isoformat()
        supabase.seed("journal_entries", {
            "user_id": ALICE_ID, "content": "last year", "mood": "content",
            "themes": ["travel"], "created_at": old,
        })

        trends = client.get("/api/analytics/mood-trends", params={"days": 400}, headers=alice)
        themes = client.get("/api/analytics/themes", params={"days": 400}, headers=alice)

        assert trends.status_code == 200
        assert [point["mood"] for point in trends.json()] == [7]
        assert themes.status_code == 200
        assert themes.json()[0]["theme"] == "travel"


def test_storage_failure_is_database_error(client, alice, supabase):
    supabase.failing_tables.add("journal_entries")

    response = client.get("/api/journal/entries", headers=alice)

    assert response.status_code == 500
    error = response.json()["error"]
    assert error["code"] == "DATABASE_ERROR"
    assert error["details"]["operation"] == "journal_entries.list_active"


def test_correlation_id_is_echoed(client):
    response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert response.headers["X-Correlation-ID"] == "abc-123"


def test_only_enrichment_routes_are_coroutines():
    from fastapi.routing import APIRoute

    from main import create_app

    coroutine_routes = {
        route.endpoint.__name__
        for route in create_app().routes
        if isinstance(route, APIRoute) and inspect.iscoroutinefunction(route.endpoint)
    }

    assert coroutine_routes == {
        "health_check",
        "create_entry",
        "update_entry",
        "generate_prompt",
        "current_prompt",
        "generate_insights",
    }
