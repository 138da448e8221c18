from file_manager.cli import main

raise SystemExit(main())
