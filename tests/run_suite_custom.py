import subprocess
import os
import sys
import glob

def run_tests():
    # Root of the project
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    tests_dir = os.path.join(project_root, "tests")

    # Every script is standalone: python tests/test_xxx.py
    test_files = sorted(glob.glob(os.path.join(tests_dir, "test_*.py")))

    total = len(test_files)
    passed = 0
    failed_files = []

    print(f"Discovered {total} test files.")
    print("="*60)

    for full_path in test_files:
        filename = os.path.basename(full_path)
        print(f"Running {filename} ... ", end='', flush=True)

        result = subprocess.run(
            [sys.executable, full_path],
            cwd=project_root,
            capture_output=True,
            text=True
        )
        output = result.stdout + result.stderr

        if result.returncode != 0:
            status = "FAILED (Exit Code)"
        elif "TEST FAILED" in output or "Traceback" in output:
            status = "FAILED (Output Check)"
        else:
            status = None

        if status:
            print(status)
            # Show last 20 lines for context
            lines = output.strip().split('\n')
            print("-" * 20)
            print("\n".join(lines[-20:]))
            print("-" * 20)
            failed_files.append(filename)
        else:
            print("PASSED")
            passed += 1

    print("="*60)
    print(f"Summary: {passed}/{total} Tests Passed")

    if failed_files:
        print("\nFailed tests:")
        for f in failed_files:
            print(f" - {f}")
        return False
    return True

if __name__ == "__main__":
    success = run_tests()
    sys.exit(0 if success else 1)
