from tslaunch.cli import launch_main

if __name__ == "__main__":
    raise SystemExit(launch_main())
