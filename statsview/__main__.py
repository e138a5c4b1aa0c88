from statsview.app.main import main

raise SystemExit(main())
