import argparse
import sys
import pathlib

# -- repo-root/src on sys.path (running from a checkout)
SRC = pathlib.Path(__file__).resolve().parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from mandragora.config import setup_logging
from mandragora.io.patterns import PATTERNS
from mandragora.sim.simulate import run_comprehensive_simulations, summarize


def main(argv=None):
    parser = argparse.ArgumentParser(description="Play Mandragora Mania agents against each other.")
    parser.add_argument("--agents", nargs="+", default=["analyzer", "first", "random"])
    parser.add_argument("--patterns", nargs="+", default=[p.id for p in PATTERNS])
    parser.add_argument("--games", type=int, default=10, help="games per pairing and pattern")
    parser.add_argument("--workers", type=int, default=None, help="0 = no process pool")
    parser.add_argument("--out", default="mandragora_simulations.csv")
    parser.add_argument("--log-level", default=None)
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    df = run_comprehensive_simulations(args.agents, args.patterns, args.games, args.workers)
    df.to_csv(args.out, index=False)

    print("\nSummary Statistics:")
    print(summarize(df))


if __name__ == "__main__":
    main()
