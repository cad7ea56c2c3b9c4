from sl.cli import main

raise SystemExit(main())
