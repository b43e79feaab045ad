"""
Unit tests for queue handles.
"""

from jobs_rpc.queue import QueueHandle

STATS = {
    "stats": [
        {"pipeline": "running", "driver": "memory", "ready": True},
        {"pipeline": "stopped", "driver": "memory", "ready": False},
    ]
}


class TestQueueHandle:
    """Tests for QueueHandle."""

    def test_equality_ignores_facade(self, make_jobs):
        """Test handles compare by name only."""
        jobs_a, _ = make_jobs()
        jobs_b, _ = make_jobs()

        assert jobs_a.connect("q") == jobs_b.connect("q")
        assert hash(jobs_a.connect("q")) == hash(jobs_b.connect("q"))
        assert jobs_a.connect("q") != jobs_a.connect("r")

    def test_repr_hides_facade(self, make_jobs):
        """Test the facade is not part of the repr."""
        jobs, _ = make_jobs()

        assert repr(jobs.connect("q")) == "QueueHandle(name='q')"

    def test_pause_routes_through_facade(self, make_jobs):
        """Test single-queue pause."""
        sent = []
        jobs, _ = make_jobs({"jobs.Pause": lambda request: sent.append(request.pipelines)})

        jobs.connect("q").pause()

        assert sent == [["q"]]

    def test_resume_routes_through_facade(self, make_jobs):
        """Test single-queue resume."""
        sent = []
        jobs, _ = make_jobs({"jobs.Resume": lambda request: sent.append(request.pipelines)})

        jobs.connect("q").resume()

        assert sent == [["q"]]

    def test_destroy_routes_through_facade(self, make_jobs):
        """Test single-queue destroy."""
        sent = []
        jobs, _ = make_jobs({"jobs.Destroy": lambda request: sent.append(request.pipelines)})

        jobs.connect("q").destroy()

        assert sent == [["q"]]

    def test_get_pipeline_stat(self, make_jobs):
        """Test the stat for this pipeline is picked out."""
        jobs, _ = make_jobs({"jobs.Stat": STATS})

        stat = jobs.connect("stopped").get_pipeline_stat()

        assert stat is not None
        assert stat.pipeline == "stopped"

    def test_get_pipeline_stat_missing(self, make_jobs):
        """Test unknown pipelines have no stat."""
        jobs, _ = make_jobs({"jobs.Stat": STATS})

        assert jobs.connect("unknown").get_pipeline_stat() is None

    def test_is_paused(self, make_jobs):
        """Test paused state follows the ready flag."""
        jobs, _ = make_jobs({"jobs.Stat": STATS})

        assert jobs.connect("stopped").is_paused() is True
        assert jobs.connect("running").is_paused() is False
        assert jobs.connect("unknown").is_paused() is False

    def test_direct_construction(self, make_jobs):
        """Test handles can be built by the caller."""
        jobs, gateway = make_jobs()

        queue = QueueHandle(name="manual", jobs=jobs)

        assert queue == jobs.connect("manual")
        assert gateway.calls == []
