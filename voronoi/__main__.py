from voronoi.main import main

raise SystemExit(main())
