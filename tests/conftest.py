"""Shared test fixtures for Lineage Insight."""

import json
import logging

import pytest

from lineage_insight.models import (
    Analytics,
    Commit,
    Feature,
    FileChange,
    FunctionChange,
    ProjectData,
    PromptSession,
    Repository,
    TokenUsage,
    WeeklyVelocity,
)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by setup_logging so tests stay independent."""
    yield
    logger = logging.getLogger("lineage_insight")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def sample_project():
    """Small project: three coupled commits, two features, four prompts."""
    commits = (
        Commit(
            hash="a" * 40,
            timestamp="2024-01-01T09:00:00Z",
            author_name="alice",
            subject="add parser",
            is_assistant=True,
            change_type="new_feature",
            cluster_id=1,
            files_changed=(
                FileChange(
                    path="x.ts",
                    lines_added=10,
                    functions=(FunctionChange(name="parse"), FunctionChange(name="lex")),
                ),
                FileChange(path="y.ts", lines_added=4),
            ),
        ),
        Commit(
            hash="b" * 40,
            timestamp="2024-01-02T14:00:00Z",
            author_name="bob",
            subject="fix parser crash",
            change_type="bug_fix",
            cluster_id=1,
            files_changed=(
                FileChange(path="x.ts", functions=(FunctionChange(name="parse"),)),
                FileChange(path="y.ts"),
            ),
        ),
        Commit(
            hash="c" * 40,
            timestamp="2024-01-03T09:30:00Z",
            author_name="alice",
            subject="refactor parser",
            is_assistant=True,
            change_type="refactor",
            cluster_id=2,
            files_changed=(FileChange(path="x.ts"), FileChange(path="y.ts")),
        ),
    )
    features = (
        Feature(
            cluster_id=1,
            auto_label="Parser",
            title="Expression parser",
            commit_hashes=("a" * 40, "b" * 40),
            time_start="2024-01-01T09:00:00Z",
            time_end="2024-01-02T14:00:00Z",
            change_type_distribution={"new_feature": 1, "bug_fix": 1},
        ),
        Feature(
            cluster_id=2,
            auto_label="Parser cleanup",
            commit_hashes=("c" * 40,),
            time_start="2024-01-03T09:30:00Z",
            time_end="2024-01-03T09:30:00Z",
            change_type_distribution={"refactor": 1},
        ),
    )
    sessions = (
        PromptSession(
            session_id="s1",
            prompt_text="add an expression parser for the query language",
            timestamp="2024-01-01T08:50:00Z",
            associated_feature_ids=(1,),
            files_touched=("x.ts", "y.ts"),
            files_written=("x.ts",),
            tool_call_count=5,
            model="sonnet",
            token_usage=TokenUsage(input_tokens=1200, output_tokens=300),
        ),
        PromptSession(
            session_id="s1",
            prompt_text="add an expression parser for the query language please",
            timestamp="2024-01-01T08:55:00Z",
            tool_call_count=2,
        ),
        PromptSession(
            session_id="s2",
            prompt_text="why does the parser crash on empty input",
            timestamp="2024-01-02T13:40:00Z",
        ),
        PromptSession(
            session_id="s2",
            prompt_text="clean it up",
            timestamp="2024-01-03T09:20:00Z",
            files_written=("x.ts", "y.ts"),
        ),
    )
    analytics = Analytics(
        total_features=2,
        total_functions_modified=2,
        total_prompts_detected=4,
        assistant_commit_percentage=2 / 3,
        avg_prompt_similarity=0.5,
        most_modified_files=("x.ts", "y.ts"),
        most_modified_functions=("parse", "lex"),
        change_type_totals={"new_feature": 1, "bug_fix": 1, "refactor": 1},
        velocity_by_week=(WeeklyVelocity(week="2024-W01", commits=3, features=2),),
    )
    return ProjectData(
        repository=Repository(
            path="/repo/demo", name="demo", total_commits=3, languages_detected=("TypeScript",)
        ),
        commits=commits,
        features=features,
        prompt_sessions=sessions,
        analytics=analytics,
    )


@pytest.fixture
def sample_export():
    """camelCase export in the shape written by the upstream extractor."""
    return {
        "repository": {
            "path": "/repo/demo",
            "name": "demo",
            "totalCommits": 3,
            "dateRange": {"start": "2024-01-01T09:00:00Z", "end": "2024-01-03T09:00:00Z"},
            "languagesDetected": ["TypeScript", "Rust"],
        },
        "commits": [
            {
                "hash": h,
                "authorName": "alice",
                "authorEmail": "alice@example.com",
                "timestamp": ts,
                "subject": f"change {h}",
                "body": "",
                "isClaudeCode": h != "b",
                "sessionId": "s1" if h != "b" else None,
                "changeType": "new_feature",
                "changeTypeConfidence": 0.9,
                "clusterId": 1,
                "filesChanged": [
                    {
                        "path": "x.ts",
                        "linesAdded": 3,
                        "linesRemoved": 1,
                        "functions": [
                            {"name": "run", "linesAdded": 3, "linesRemoved": 1, "diffText": "+x"}
                        ],
                    },
                    {"path": "y.ts", "linesAdded": 1, "linesRemoved": 0, "functions": []},
                ],
            }
            for h, ts in (
                ("a", "2024-01-15T09:00:00Z"),
                ("b", "2024-01-16T09:00:00Z"),
                ("c", "2024-01-17T09:00:00Z"),
            )
        ],
        "features": [
            {
                "clusterId": 1,
                "title": None,
                "autoLabel": "Runner",
                "narrative": "Built the runner",
                "intent": None,
                "keyDecisions": ["sync first"],
                "commitHashes": ["a", "b", "c"],
                "timeStart": "2024-01-15T09:00:00Z",
                "timeEnd": "2024-01-17T09:00:00Z",
                "functionsTouched": ["run"],
                "totalLinesAdded": 10,
                "totalLinesRemoved": 3,
                "primaryFiles": ["x.ts"],
                "changeTypeDistribution": {"new_feature": 3},
                "dependencies": [],
                "subFeatures": [
                    {
                        "promptText": "build the runner",
                        "sessionId": "s1",
                        "promptIndex": 0,
                        "timestamp": "2024-01-15T08:50:00Z",
                        "timeEnd": None,
                        "commitHashes": ["a"],
                        "filesWritten": ["x.ts"],
                        "linesAdded": 3,
                        "linesRemoved": 1,
                        "changeType": "new_feature",
                        "model": "sonnet",
                    }
                ],
            }
        ],
        "promptSessions": [
            {
                "sessionId": "s1",
                "promptText": "build the runner for background jobs",
                "timestamp": "2024-01-15T08:50:00Z",
                "associatedCommitHashes": ["a"],
                "associatedFeatureIds": [1],
                "similarityScore": 0.8,
                "scopeMatch": 0.7,
                "intent": None,
                "filesTouched": ["x.ts", "y.ts"],
                "filesWritten": ["x.ts"],
                "toolCallCount": 4,
                "model": "sonnet",
                "tokenUsage": {"inputTokens": 100, "outputTokens": 50, "cacheReadTokens": 7},
                "timeEnd": None,
            },
            {
                "sessionId": "s2",
                "promptText": "explain the runner",
                "timestamp": "2024-01-20T10:00:00Z",
                "associatedCommitHashes": [],
                "associatedFeatureIds": [],
                "similarityScore": 0.1,
                "scopeMatch": 0.0,
                "intent": None,
                "filesTouched": [],
                "filesWritten": [],
                "toolCallCount": 0,
                "model": None,
                "tokenUsage": {"inputTokens": 0, "outputTokens": 0, "cacheReadTokens": 0},
                "timeEnd": None,
            },
        ],
        "analytics": {
            "totalFeatures": 1,
            "totalFunctionsModified": 1,
            "totalPromptsDetected": 2,
            "claudeCodeCommitPercentage": 0.66,
            "avgPromptSimilarity": 0.45,
            "mostModifiedFiles": ["x.ts", "y.ts"],
            "mostModifiedFunctions": ["run"],
            "changeTypeTotals": {"new_feature": 3},
            "velocityByWeek": [
                {"week": "2024-W03", "features": 1, "commits": 3},
            ],
        },
    }


@pytest.fixture
def snapshot_file(tmp_path, sample_export):
    """The camelCase export written to disk."""
    path = tmp_path / "lineage.json"
    path.write_text(json.dumps(sample_export), encoding="utf-8")
    return path
