from folder_timestamps.cli import main

raise SystemExit(main())
