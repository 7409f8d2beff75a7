"""
Replay 진입점

실행 방법:
    python -m replay transactions.csv
"""

from replay.bootstrap import run

if __name__ == "__main__":
    run()
