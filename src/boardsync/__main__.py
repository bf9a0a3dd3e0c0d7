from boardsync.cli import main

raise SystemExit(main())
