"""
Creative Bench - creative-writing benchmarks for language models.

Generates text from each candidate model through an OpenAI-compatible
backend, scores every output with a judge model, and ranks the results.

Main entry points:
    - creative_bench.main: CLI entrypoint
    - creative_bench.core.runner: BenchmarkOrchestrator and run_benchmark()
    - creative_bench.models.config: Config and load_env()
"""
