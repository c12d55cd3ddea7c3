import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from adjgraph.benchmark import build_topology, run_benchmark
from adjgraph.config import DEFAULT_CONFIG, load_config
from adjgraph.exceptions import BenchmarkMismatch, ConfigError
from adjgraph.graph import WeightedGraph
from adjgraph.metrics import Metrics
from adjgraph.queries import generate_queries
from adjgraph.topology import save_graph_yaml
from adjgraph.visualize import plot_metrics


# ----------------------------------------------------------
# Config
# ----------------------------------------------------------

def test_load_config_defaults():
    config = load_config()
    assert config == DEFAULT_CONFIG
    config['nodes'] = 1
    assert DEFAULT_CONFIG['nodes'] == 25


def test_load_config_merges_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("nodes: 10\nnum_queries: 3\nextra: true\n")
    config = load_config(path)
    assert config['nodes'] == 10
    assert config['num_queries'] == 3
    assert config['extra'] is True
    assert config['seed'] == 42


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == DEFAULT_CONFIG


def test_load_config_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigError):
        load_config(path)


# ----------------------------------------------------------
# Queries and metrics
# ----------------------------------------------------------

def test_generate_queries():
    G = WeightedGraph(10)
    queries = generate_queries(G, num_queries=8, seed=1)
    assert [q['id'] for q in queries] == list(range(8))
    assert all(q['src'] != q['dst'] for q in queries)
    assert all(0 <= q['src'] < 10 and 0 <= q['dst'] < 10 for q in queries)
    assert queries == generate_queries(G, num_queries=8, seed=1)

    with pytest.raises(ValueError):
        generate_queries(WeightedGraph(1))


def test_metrics_summary_ignores_missing_paths():
    metrics = Metrics()
    metrics.log(1.0, 2.0, 4.0, 2, True)
    metrics.log(3.0, 4.0, 0.0, 0, False)
    summary = metrics.summary()
    assert summary['runtime_ms'] == 2.0
    assert summary['baseline_runtime_ms'] == 3.0
    assert summary['path_cost'] == 4.0
    assert summary['hops'] == 2.0
    assert summary['found'] == 0.5


def test_metrics_summary_empty():
    assert all(v == 0.0 for v in Metrics().summary().values())


# ----------------------------------------------------------
# Benchmark
# ----------------------------------------------------------

def test_run_benchmark_random_topology():
    config = load_config()
    config.update({'nodes': 20, 'num_queries': 6, 'seed': 9})
    metrics = run_benchmark(config)
    assert len(metrics.data['runtime_ms']) == 6
    # Barabasi-Albert graphs are connected
    assert metrics.data['found'] == [1.0] * 6
    assert metrics.summary()['path_cost'] > 0


def test_run_benchmark_with_unreachable_targets():
    G = WeightedGraph.from_edges([(0, 1, 1.0), (2, 3, 1.0)])
    metrics = run_benchmark({'num_queries': 10, 'seed': 0}, graph=G)
    assert 0.0 in metrics.data['found']


def test_build_topology_from_file(tmp_path):
    G = WeightedGraph.from_edges([(0, 1, 1.0), (1, 2, 2.0)])
    path = save_graph_yaml(G, tmp_path / "topology.yaml")
    assert build_topology({'topology_path': str(path)}) == G


def test_run_benchmark_detects_mismatch(monkeypatch):
    monkeypatch.setattr("adjgraph.benchmark.run_dijkstra", lambda G, s, t: ([s, t], -1.0))
    with pytest.raises(BenchmarkMismatch):
        run_benchmark({'nodes': 10, 'num_queries': 2})


def test_plot_metrics():
    metrics = Metrics()
    metrics.log(1.0, 2.0, 4.0, 2, True)
    figures = plot_metrics(metrics, show=False)
    assert len(figures) == len(metrics.data)
    plt.close('all')


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
