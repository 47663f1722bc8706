import subprocess
import sys

def main():
    STEPS = [
        [sys.executable, "-m", "etl.validate_data"],
        [sys.executable, "-m", "etl.validate_customers", "--strict"],
    ]

    for cmd in STEPS:
        print("→", " ".join(cmd[1:]))
        res = subprocess.run(cmd)
        if res.returncode != 0:
            print("✖ etapa falhou:", " ".join(cmd[1:]))
            sys.exit(1)

if __name__ == "__main__":
    main()
