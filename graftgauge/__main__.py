from graftgauge.main import main

raise SystemExit(main())
