from html_skeleton.cli import run

if __name__ == "__main__":
    run()
