from objscope.cli import main

raise SystemExit(main())
