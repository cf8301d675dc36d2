from hostprobe.main import main

raise SystemExit(main())
