from gobblers.cli import main

raise SystemExit(main())
